import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ZonalLeader',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('address', models.TextField(verbose_name='address')),
                ('contact_number', models.CharField(max_length=30, verbose_name='contact number')),
                ('appointed_date', models.DateField(verbose_name='appointed date')),
                ('zone_number', models.CharField(db_index=True, help_text='Zone this leader is responsible for (usually 1-8)', max_length=10, verbose_name='zone number')),
            ],
            options={
                'verbose_name': 'Zonal Leader',
                'verbose_name_plural': 'Zonal Leaders',
                'ordering': ['zone_number', 'appointed_date', 'created_at'],
            },
        ),
        migrations.CreateModel(
            name='UnitLeader',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('first_name', models.CharField(max_length=100)),
                ('last_name', models.CharField(max_length=100)),
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('address', models.TextField(verbose_name='address')),
                ('contact_number', models.CharField(max_length=30, verbose_name='contact number')),
                ('appointed_date', models.DateField(verbose_name='appointed date')),
                ('zonal_number', models.CharField(choices=[('1', 'Zone 1'), ('2', 'Zone 2'), ('3', 'Zone 3'), ('4', 'Zone 4'), ('5', 'Zone 5'), ('6', 'Zone 6'), ('7', 'Zone 7'), ('8', 'Zone 8')], max_length=2, verbose_name='zonal number')),
                ('unit_number', models.CharField(max_length=10, verbose_name='unit number')),
                ('zonal_leader', models.ForeignKey(help_text='Resolved from the zonal number', on_delete=django.db.models.deletion.PROTECT, related_name='unit_leaders', to='leadership.zonalleader', verbose_name='zonal leader')),
            ],
            options={
                'verbose_name': 'Unit Leader',
                'verbose_name_plural': 'Unit Leaders',
                'ordering': ['-created_at'],
                'abstract': False,
                'indexes': [models.Index(fields=['zonal_number', 'unit_number'], name='unit_leader_zone_unit_idx')],
            },
        ),
    ]
