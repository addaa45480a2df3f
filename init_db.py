from jna_registry.backend.src.core.config import get_settings
from jna_registry.backend.src.db import Database


def init_db():
    settings = get_settings()
    database = Database.from_settings(settings)
    print(f"🚀 Connecting to {database.engine.url.render_as_string(hide_password=True)}")
    database.create_ledger()
    print(f"✅ Table '{settings.ledger_table}' ready!")
    database.dispose()


if __name__ == "__main__":
    init_db()
