import uuid

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='MemberRegistration',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('church', models.CharField(max_length=200, verbose_name='church')),
                ('name_of_father', models.CharField(max_length=200, verbose_name='name of father')),
                ('occupation_of_father', models.CharField(blank=True, max_length=200, verbose_name='occupation of father')),
                ('date_of_birth_of_father', models.DateField(blank=True, null=True, verbose_name='father date of birth')),
                ('baptised_date_of_father', models.DateField(blank=True, null=True, verbose_name='father baptised date')),
                ('baptised_church', models.CharField(blank=True, max_length=200, verbose_name='father baptised church')),
                ('name_of_mother', models.CharField(max_length=200, verbose_name='name of mother')),
                ('occupation_of_mother', models.CharField(blank=True, max_length=200, verbose_name='occupation of mother')),
                ('date_of_birth_of_mother', models.DateField(blank=True, null=True, verbose_name='mother date of birth')),
                ('baptised_date_of_mother', models.DateField(blank=True, null=True, verbose_name='mother baptised date')),
                ('address', models.TextField(verbose_name='address')),
                ('contact_no', models.CharField(max_length=30, verbose_name='contact number')),
                ('married_date', models.DateField(blank=True, null=True, verbose_name='married date')),
                ('married_church', models.CharField(blank=True, max_length=200, verbose_name='married church')),
                ('capable_donation_per_month', models.DecimalField(blank=True, decimal_places=2, max_digits=12, null=True, validators=[django.core.validators.MinValueValidator(0)], verbose_name='capable donation per month')),
            ],
            options={
                'verbose_name': 'Member Registration',
                'verbose_name_plural': 'Member Registrations',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Child',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField(default=0)),
                ('name_of_child', models.CharField(max_length=200, verbose_name='name of child')),
                ('date_of_birth_child', models.DateField(verbose_name='date of birth')),
                ('baptised_date_of_child', models.DateField(blank=True, null=True, verbose_name='baptised date')),
                ('baptised_church_of_child', models.CharField(blank=True, max_length=200, verbose_name='baptised church')),
                ('registration', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='children', to='members.memberregistration')),
            ],
            options={
                'verbose_name': 'Child',
                'verbose_name_plural': 'Children',
                'ordering': ['registration', 'position', 'id'],
            },
        ),
    ]
