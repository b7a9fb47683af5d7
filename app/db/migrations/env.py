from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

# -----------------------------
# Settings (.env is loaded by app.core.config)
# -----------------------------
from app.core.config import get_settings

# -----------------------------
# SQLAlchemy Base + Models
# -----------------------------
from app.db.session import Base
from app.models.user import User  # noqa: F401
from app.models.hall import Hall  # noqa: F401
from app.models.booking import Booking  # noqa: F401

config = context.config
config.set_main_option("sqlalchemy.url", get_settings().database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline():
    """Emit SQL to the script output instead of a live connection."""
    context.configure(
        url=config.get_main_option("sqlalchemy.url"),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connectable = create_engine(config.get_main_option("sqlalchemy.url"), poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
