"""
Baptism, burial and marriage register endpoints.
"""

from core.api_tags import APITags, record_viewset_schema
from core.viewsets import ConsoleRecordViewSet

from .models import Baptism, Burial, Marriage
from .serializers import BaptismSerializer, BurialSerializer, MarriageSerializer


@record_viewset_schema(APITags.SACRAMENTS, 'baptism')
class BaptismViewSet(ConsoleRecordViewSet):
    queryset = Baptism.objects.all()
    serializer_class = BaptismSerializer
    record_type = 'baptism'
    search_fields = ['child_name']
    filterset_fields = ['are_parents_married', 'is_father_catholic']
    ordering_fields = ['date_of_baptism', 'child_name', 'created_at']


@record_viewset_schema(APITags.SACRAMENTS, 'burial')
class BurialViewSet(ConsoleRecordViewSet):
    queryset = Burial.objects.all()
    serializer_class = BurialSerializer
    record_type = 'burial'
    search_fields = ['name_of_deceased', 'custodian']
    filterset_fields = ['baptized']
    ordering_fields = ['burial_date', 'date_of_death', 'created_at']


@record_viewset_schema(APITags.SACRAMENTS, 'marriage')
class MarriageViewSet(ConsoleRecordViewSet):
    queryset = Marriage.objects.all()
    serializer_class = MarriageSerializer
    record_type = 'marriage'
    search_fields = ['name_of_bride', 'name_of_groom', 'shortened_couple_name']
    filterset_fields = ['mass_type', 'need_church_choir', 'use_church_decos']
    ordering_fields = ['date_of_marriage', 'created_at']
