import argparse
import logging

from sqlalchemy import create_engine

from adminseed.core.config import Settings
from adminseed.services.admin_seed import remove_admin, seed_admin

def main(argv=None):
    parser = argparse.ArgumentParser(description="Create or remove the administrator user.")
    parser.add_argument("action", nargs="?", choices=["up", "down"], default="up")
    args = parser.parse_args(argv)

    cfg = Settings()
    logging.basicConfig(level=cfg.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    engine = create_engine(cfg.database_url, future=True)
    try:
        with engine.begin() as conn:
            if args.action == "down":
                remove_admin(conn, cfg.admin_email)
            else:
                seed_admin(conn, cfg.admin_email, cfg.admin_password, rounds=cfg.bcrypt_rounds)
    finally:
        engine.dispose()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
