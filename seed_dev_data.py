"""Seed the development database with a demo student in the source table."""

from jna_registry.backend.src.core.config import get_settings
from jna_registry.backend.src.db import Database
from jna_registry.backend.src.models.base import Base
from jna_registry.backend.src.services.seed import seed_demo_student


def main() -> None:
    """Create tables (if needed) and ensure a demo student exists."""

    database = Database.from_settings(get_settings())
    Base.metadata.create_all(bind=database.engine)

    with database.session_scope() as session:
        result = seed_demo_student(session)
        session.flush()

        status = "created" if result.created else "unchanged"
        print("✅ Development data ready!")
        print(
            f"Student ({status}): {result.student.full_name} "
            f"[phone={result.student.phone_number}, university={result.student.university}]"
        )
        print()
        print(f"Try: GET /search?phone={result.student.phone_number[-8:]}")

    database.dispose()


if __name__ == "__main__":
    main()
