"""
Admin screens for the event scheduler.
"""

from django.contrib import admin

from .models import CATEGORY_COLORS, Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):

    list_display = ('title', 'category', 'start_date', 'end_date', 'location', 'recurrence', 'created_by')
    list_filter = ('category', 'all_day', 'recurrence', 'reminder')
    search_fields = ('title', 'location', 'description')
    date_hierarchy = 'start_date'
    readonly_fields = ('id', 'created_by', 'created_at', 'updated_at')

    def save_model(self, request, obj, form, change):
        if not change:
            obj.created_by = request.user
            if 'color' not in form.changed_data:
                obj.color = CATEGORY_COLORS[obj.category]
        elif 'category' in form.changed_data and 'color' not in form.changed_data:
            obj.color = CATEGORY_COLORS[obj.category]
        super().save_model(request, obj, form, change)
