import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Baptism',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('child_name', models.CharField(db_index=True, max_length=200, verbose_name='child name')),
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('place_of_birth', models.CharField(max_length=200, verbose_name='place of birth')),
                ('date_of_baptism', models.DateField(verbose_name='date of baptism')),
                ('time_of_baptism', models.TimeField(verbose_name='time of baptism')),
                ('name_of_mother', models.CharField(max_length=200, verbose_name='name of mother')),
                ('name_of_father', models.CharField(max_length=200, verbose_name='name of father')),
                ('name_of_godfather', models.CharField(max_length=200, verbose_name='name of godfather')),
                ('name_of_godmother', models.CharField(max_length=200, verbose_name='name of godmother')),
                ('current_address', models.TextField(verbose_name='current address')),
                ('contact_number', models.CharField(max_length=30, verbose_name='contact number')),
                ('are_parents_married', models.BooleanField(blank=True, null=True, verbose_name='parents married')),
                ('is_father_catholic', models.BooleanField(blank=True, null=True, verbose_name='father is catholic')),
            ],
            options={
                'verbose_name': 'Baptism',
                'verbose_name_plural': 'Baptisms',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Burial',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name_of_deceased', models.CharField(db_index=True, max_length=200, verbose_name='name of deceased')),
                ('date_of_death', models.DateField(verbose_name='date of death')),
                ('date_of_birth', models.DateField(verbose_name='date of birth')),
                ('burial_date', models.DateField(verbose_name='burial date')),
                ('baptized', models.BooleanField(default=False, verbose_name='baptized')),
                ('cause_of_death', models.CharField(max_length=255, verbose_name='cause of death')),
                ('custodian', models.CharField(help_text='Family member or guardian arranging the burial', max_length=200, verbose_name='custodian')),
            ],
            options={
                'verbose_name': 'Burial',
                'verbose_name_plural': 'Burials',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
        migrations.CreateModel(
            name='Marriage',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('name_of_bride', models.CharField(max_length=200, verbose_name='name of bride')),
                ('name_of_groom', models.CharField(max_length=200, verbose_name='name of groom')),
                ('date_of_marriage', models.DateField(verbose_name='date of marriage')),
                ('time_of_mass', models.TimeField(verbose_name='time of mass')),
                ('shortened_couple_name', models.CharField(help_text='How the couple is announced, e.g. "Kamal & Nadeesha"', max_length=200, verbose_name='shortened couple name')),
                ('mass_type', models.CharField(choices=[('Full', 'Full'), ('Half', 'Half')], max_length=10, verbose_name='mass type')),
                ('need_church_choir', models.CharField(choices=[('Yes', 'Yes'), ('No', 'No')], max_length=3, verbose_name='need church choir')),
                ('use_church_decos', models.CharField(choices=[('Yes', 'Yes'), ('No', 'No')], max_length=3, verbose_name='use church decorations')),
            ],
            options={
                'verbose_name': 'Marriage',
                'verbose_name_plural': 'Marriages',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
