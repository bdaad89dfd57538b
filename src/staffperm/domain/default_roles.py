"""Role defaults installed when no role configuration has been stored yet."""

from staffperm.domain.value_objects import Permission

DEFAULT_ROLE_PERMISSIONS: dict[str, frozenset[Permission]] = {
    "Manager": frozenset({
        Permission.VIEW_REPORTS,
        Permission.MANAGE_EMPLOYEES,
        Permission.MANAGE_DOCUMENTS,
        Permission.VIEW_ALL_DOCUMENTS,
        Permission.CREATE_NEWS,
        Permission.MANAGE_ONBOARDING,
        Permission.MANAGE_SURVEYS,
        Permission.VIEW_SYSTEM_STATUS,
        Permission.MANAGE_SETTINGS,
        Permission.MANAGE_EVALUATIONS,
        Permission.MANAGE_DEBTORS,
    }),
    "Senior Medewerker": frozenset({
        Permission.CREATE_NEWS,
        Permission.MANAGE_ONBOARDING,
        Permission.MANAGE_SURVEYS,
        Permission.MANAGE_EVALUATIONS,
        Permission.VIEW_REPORTS,
        Permission.MANAGE_DEBTORS,
    }),
    "Medewerker": frozenset(),
}
