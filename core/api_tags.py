"""
Unified API Documentation Tags for the parish console.

This module provides a single source of truth for all API documentation tags
to prevent duplicate sections in the OpenAPI/Swagger documentation.
"""

from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiExample


class APITags:
    """
    Unified API tags for consistent documentation organization.

    Usage:
        @extend_schema(tags=[APITags.AUTHENTICATION])
        def my_view(request):
            pass
    """

    AUTHENTICATION = "Authentication"  # Login, logout, registration
    SACRAMENTS = "Sacraments"  # Baptisms, burials, marriages
    MINISTRIES = "Ministries"  # Choir, youth, Sunday school, parish committee
    LEADERSHIP = "Leadership"  # Zonal and unit leaders
    MEMBERS = "Member Registrations"  # Family registrations with children
    EVENTS = "Events"  # Parish calendar
    DASHBOARD = "Dashboard"  # Read-only aggregates
    SYSTEM_HEALTH = "System Health"  # Health checks, status endpoints


TAG_DESCRIPTIONS = {
    APITags.AUTHENTICATION: "Console user registration, login and logout",
    APITags.SACRAMENTS: "Baptism, burial and marriage records",
    APITags.MINISTRIES: "Choir, youth association, Sunday school and parish committee rosters",
    APITags.LEADERSHIP: "Zonal leaders, unit leaders and the zone reporting structure",
    APITags.MEMBERS: "Family registrations including children",
    APITags.EVENTS: "Parish event calendar",
    APITags.DASHBOARD: "Aggregate counts for the console landing page",
    APITags.SYSTEM_HEALTH: "Health checks and system status for load balancers",
}


def get_api_tags_metadata():
    """
    Returns OpenAPI tags metadata for Spectacular configuration.

    Add this to your SPECTACULAR_SETTINGS:
    TAGS = get_api_tags_metadata()
    """
    return [
        {"name": tag, "description": description}
        for tag, description in TAG_DESCRIPTIONS.items()
    ]


COMMON_EXAMPLES = {
    'validation_error': OpenApiExample(
        name="Validation Error",
        description="Request validation failed",
        value={
            "type": "about:blank",
            "title": "Bad Request",
            "status": 400,
            "detail": "zonal_number: No zonal leader is assigned to zone 3.",
            "error": "zonal_number: No zonal leader is assigned to zone 3.",
            "invalid_params": [
                {"name": "zonal_number", "reason": "No zonal leader is assigned to zone 3."}
            ]
        },
        response_only=True,
        status_codes=['400'],
    ),
    'authentication_error': OpenApiExample(
        name="Authentication Error",
        description="Authentication credentials invalid or missing",
        value={
            "type": "about:blank",
            "title": "Unauthorized",
            "status": 401,
            "detail": "Invalid email or password",
            "error": "Invalid email or password"
        },
        response_only=True,
        status_codes=['401'],
    ),
}


def authentication_schema(**kwargs):
    """Schema decorator for authentication endpoints."""
    defaults = {
        'tags': [APITags.AUTHENTICATION],
        'examples': [
            COMMON_EXAMPLES['validation_error'],
            COMMON_EXAMPLES['authentication_error'],
        ]
    }
    defaults.update(kwargs)
    return extend_schema(**defaults)


def system_health_schema(**kwargs):
    """Schema decorator for system health endpoints."""
    defaults = {
        'tags': [APITags.SYSTEM_HEALTH],
    }
    defaults.update(kwargs)
    return extend_schema(**defaults)


def record_viewset_schema(tag, label, plural=None):
    """
    Schema decorator for a console record viewset.

    Every record type exposes the same five operations; this fills in the
    summaries from the record's human label.
    """
    plural = plural or f"{label}s"
    return extend_schema_view(
        list=extend_schema(
            summary=f"List {plural}",
            description=f"All {plural}, newest first. `search` filters case-insensitively.",
            tags=[tag],
        ),
        create=extend_schema(summary=f"Add a {label}", tags=[tag]),
        retrieve=extend_schema(summary=f"View a {label}", tags=[tag]),
        update=extend_schema(summary=f"Replace a {label}", tags=[tag]),
        partial_update=extend_schema(summary=f"Edit a {label}", tags=[tag]),
        destroy=extend_schema(summary=f"Delete a {label}", tags=[tag]),
    )
