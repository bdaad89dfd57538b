"""Permission identifiers recognized by the engine."""

from enum import StrEnum


class Permission(StrEnum):
    """Capabilities that can be granted to a subject."""

    VIEW_REPORTS = "VIEW_REPORTS"
    MANAGE_EMPLOYEES = "MANAGE_EMPLOYEES"
    MANAGE_DOCUMENTS = "MANAGE_DOCUMENTS"
    VIEW_ALL_DOCUMENTS = "VIEW_ALL_DOCUMENTS"
    CREATE_NEWS = "CREATE_NEWS"
    MANAGE_ONBOARDING = "MANAGE_ONBOARDING"
    MANAGE_SURVEYS = "MANAGE_SURVEYS"
    VIEW_SYSTEM_STATUS = "VIEW_SYSTEM_STATUS"
    MANAGE_SETTINGS = "MANAGE_SETTINGS"
    MANAGE_EVALUATIONS = "MANAGE_EVALUATIONS"
    MANAGE_DEBTORS = "MANAGE_DEBTORS"
    MANAGE_TICKETS = "MANAGE_TICKETS"
    MANAGE_BADGES = "MANAGE_BADGES"


PERMISSION_LABELS: dict[Permission, str] = {
    Permission.VIEW_REPORTS: "Rapportages Inzien",
    Permission.MANAGE_EMPLOYEES: "Medewerkers Beheren",
    Permission.MANAGE_DOCUMENTS: "Documenten Beheren (Upload/Delete)",
    Permission.VIEW_ALL_DOCUMENTS: "Inzage Alle Dossiers",
    Permission.CREATE_NEWS: "Nieuwsberichten Plaatsen",
    Permission.MANAGE_ONBOARDING: "Onboarding Trajecten Beheren",
    Permission.MANAGE_SURVEYS: "Surveys Maken & Beheren",
    Permission.VIEW_SYSTEM_STATUS: "Systeemstatus Bekijken",
    Permission.MANAGE_SETTINGS: "Rechten & Instellingen Beheren",
    Permission.MANAGE_EVALUATIONS: "Evaluaties Beheren",
    Permission.MANAGE_DEBTORS: "Debiteuren Beheer",
    Permission.MANAGE_TICKETS: "Tickets Beheren",
    Permission.MANAGE_BADGES: "Badges Beheren",
}
