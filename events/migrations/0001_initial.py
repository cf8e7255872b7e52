import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Event',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('title', models.CharField(max_length=200, verbose_name='title')),
                ('description', models.TextField(blank=True, verbose_name='description')),
                ('start_date', models.DateTimeField(db_index=True, verbose_name='start')),
                ('end_date', models.DateTimeField(verbose_name='end')),
                ('location', models.CharField(blank=True, max_length=200, verbose_name='location')),
                ('category', models.CharField(choices=[('mass', 'Mass'), ('meeting', 'Meeting'), ('holiday', 'Special Event'), ('other', 'Other Service')], default='other', max_length=20, verbose_name='category')),
                ('color', models.CharField(default='#10b981', max_length=7, verbose_name='colour')),
                ('all_day', models.BooleanField(default=False, verbose_name='all day')),
                ('recurrence', models.CharField(blank=True, choices=[('daily', 'Daily'), ('weekly', 'Weekly'), ('monthly', 'Monthly'), ('yearly', 'Yearly')], help_text='Empty for a one-off event', max_length=10, verbose_name='recurrence')),
                ('reminder', models.BooleanField(default=False, verbose_name='reminder')),
                ('reminder_time', models.DateTimeField(blank=True, null=True, verbose_name='reminder time')),
                ('created_by', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Event',
                'verbose_name_plural': 'Events',
                'ordering': ['-created_at'],
                'abstract': False,
            },
        ),
    ]
