from dataclasses import dataclass

from code_verifier.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
