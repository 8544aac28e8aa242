from __future__ import annotations

import importlib

from dotenv import load_dotenv

from uniconnect.database.bootstrap import DEMO_ACCOUNTS, SQL_DIR, apply_seed_sql, ensure_demo_users
from uniconnect.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    seed_path = SQL_DIR / "seed.sql"
    apply_seed_sql(db_config, seed_path=seed_path)
    ensure_demo_users(db_config)

    print(
        "OK: Seeded database -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )
    for role, (_, email, password) in DEMO_ACCOUNTS.items():
        print(f"  {role:<8} {email} / {password}")


if __name__ == "__main__":
    main()
