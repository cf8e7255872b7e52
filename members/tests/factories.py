"""
Factory Boy factories for member registrations.
"""

from decimal import Decimal

import factory
from factory.django import DjangoModelFactory

from ..models import Child, MemberRegistration


class MemberRegistrationFactory(DjangoModelFactory):

    class Meta:
        model = MemberRegistration

    church = "St. Anthony's Church"
    name_of_father = factory.Faker('name_male')
    name_of_mother = factory.Faker('name_female')
    address = factory.Faker('address')
    contact_no = factory.Sequence(lambda n: f"070{n:07d}")
    capable_donation_per_month = Decimal('1500.00')


class ChildFactory(DjangoModelFactory):

    class Meta:
        model = Child

    registration = factory.SubFactory(MemberRegistrationFactory)
    position = factory.Sequence(lambda n: n)
    name_of_child = factory.Faker('first_name')
    date_of_birth_child = factory.Faker('date_of_birth', maximum_age=18)
