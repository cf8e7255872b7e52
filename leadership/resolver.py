"""
Zone reporting-structure resolution.

A unit leader reports to the zonal leader of the unit's zone. The console
picks that leader by scanning the zonal leaders it has already fetched for
the first one whose zone number matches the selected zone. The same lookup
runs server-side when a unit leader is saved, so the two can never disagree
about which leader a zone resolves to.

This module must not import Django: the console client runs it on plain
JSON dicts.
"""

from collections.abc import Mapping


NO_LEADER_TITLE = "No Zonal Leader Found"
ASSIGNED_TITLE = "Assigned Zonal Leader"


def normalize_zone(zone_number):
    """Zone numbers compare as trimmed strings ("3", " 3 ", 3 are equal)."""
    if zone_number is None:
        return ''
    return str(zone_number).strip()


def _field(leader, name):
    if isinstance(leader, Mapping):
        return leader.get(name)
    return getattr(leader, name, None)


def resolve_zonal_leader(zone_number, leaders, key='zone_number'):
    """
    Return the first leader in ``leaders`` whose ``key`` equals ``zone_number``.

    ``leaders`` may hold model instances or dicts. Returns ``None`` when the
    zone is empty or no leader matches.
    """
    wanted = normalize_zone(zone_number)
    if not wanted:
        return None

    for leader in leaders:
        if normalize_zone(_field(leader, key)) == wanted:
            return leader
    return None


class LeaderAssignment:
    """
    Outcome of resolving a zone for a unit-leader form.

    ``can_submit`` is what enables the form's save action.
    """

    def __init__(self, zone_number, leader):
        self.zone_number = normalize_zone(zone_number)
        self.leader = leader

    @classmethod
    def for_zone(cls, zone_number, leaders, key='zone_number'):
        return cls(zone_number, resolve_zonal_leader(zone_number, leaders, key=key))

    @property
    def can_submit(self):
        return self.leader is not None

    @property
    def leader_id(self):
        if self.leader is None:
            return None
        return _field(self.leader, 'id')

    @property
    def leader_name(self):
        if self.leader is None:
            return ''
        first = _field(self.leader, 'first_name') or ''
        last = _field(self.leader, 'last_name') or ''
        return f"{first} {last}".strip()

    @property
    def title(self):
        return ASSIGNED_TITLE if self.can_submit else NO_LEADER_TITLE

    @property
    def message(self):
        if self.can_submit:
            return f"{self.leader_name} leads Zone {self.zone_number}."
        if not self.zone_number:
            return "Select a zone to find its zonal leader."
        return (
            f"There is no zonal leader assigned to Zone {self.zone_number}. "
            "Please assign a zonal leader first before adding unit leaders."
        )

    def __repr__(self):
        return f"<LeaderAssignment zone={self.zone_number!r} leader_id={self.leader_id!r}>"
