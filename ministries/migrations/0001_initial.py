import uuid

from django.db import migrations, models

ZONES = [('1', 'Zone 1'), ('2', 'Zone 2'), ('3', 'Zone 3'), ('4', 'Zone 4'), ('5', 'Zone 5'), ('6', 'Zone 6'), ('7', 'Zone 7'), ('8', 'Zone 8')]
UNITS = [('1', 'Unit 1'), ('2', 'Unit 2'), ('3', 'Unit 3'), ('4', 'Unit 4'), ('5', 'Unit 5'), ('6', 'Unit 6')]


def person_fields():
    return [
        ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
        ('created_at', models.DateTimeField(auto_now_add=True)),
        ('updated_at', models.DateTimeField(auto_now=True)),
        ('first_name', models.CharField(max_length=100)),
        ('last_name', models.CharField(max_length=100)),
    ]


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='ChoirMember',
            fields=person_fields() + [
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('address', models.TextField(verbose_name='address')),
                ('contact_number', models.CharField(max_length=30, verbose_name='contact number')),
                ('joined_date', models.DateField(verbose_name='joined date')),
                ('voice_part', models.CharField(choices=[('Soprano', 'Soprano'), ('Alto', 'Alto'), ('Tenor', 'Tenor'), ('Bass', 'Bass')], max_length=10, verbose_name='voice part')),
                ('is_active_member', models.BooleanField(default=True, verbose_name='active member')),
                ('instruments_played', models.JSONField(blank=True, default=list, help_text='Instrument names, in the order entered', verbose_name='instruments played')),
                ('choir_type', models.CharField(choices=[('Senior', 'Senior'), ('Junior', 'Junior'), ('English', 'English')], max_length=10, verbose_name='choir')),
            ],
            options={
                'verbose_name': 'Choir Member',
                'verbose_name_plural': 'Choir Members',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='YouthMember',
            fields=person_fields() + [
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('joined_date', models.DateField(verbose_name='joined date')),
                ('address', models.TextField(verbose_name='address')),
                ('contact_number', models.CharField(max_length=30, verbose_name='contact number')),
                ('position', models.CharField(blank=True, max_length=100, verbose_name='position')),
                ('is_active_member', models.BooleanField(default=True, verbose_name='active member')),
            ],
            options={
                'verbose_name': 'Youth Association Member',
                'verbose_name_plural': 'Youth Association Members',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='SundaySchoolTeacher',
            fields=person_fields() + [
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('appointed_date', models.DateField(verbose_name='appointed date')),
                ('address', models.TextField(verbose_name='address')),
                ('contact_number', models.CharField(max_length=30, verbose_name='contact number')),
                ('class_name', models.CharField(max_length=100, verbose_name='class')),
                ('remarks', models.TextField(blank=True, verbose_name='remarks')),
                ('is_active', models.BooleanField(default=True, verbose_name='active')),
            ],
            options={
                'verbose_name': 'Sunday School Teacher',
                'verbose_name_plural': 'Sunday School Teachers',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='ParishCommitteeMember',
            fields=person_fields() + [
                ('address', models.TextField(verbose_name='address')),
                ('phone_number', models.CharField(blank=True, max_length=30, verbose_name='phone number')),
                ('zonal_number', models.CharField(choices=ZONES, max_length=2, verbose_name='zonal number')),
                ('unit_number', models.CharField(choices=UNITS, max_length=2, verbose_name='unit number')),
                ('position', models.CharField(blank=True, max_length=100, verbose_name='position')),
                ('joined_date', models.DateField(verbose_name='joined date')),
                ('representing_committee', models.CharField(max_length=200, verbose_name='representing committee')),
            ],
            options={
                'verbose_name': 'Parish Committee Member',
                'verbose_name_plural': 'Parish Committee Members',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
