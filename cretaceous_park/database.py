import logging

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from cretaceous_park.config import get_settings

logger = logging.getLogger(__name__)


def _engine_options(db_url: str) -> dict:
    url = make_url(db_url)
    if url.get_backend_name() != 'sqlite':
        return {'pool_pre_ping': True}
    options = {'connect_args': {'check_same_thread': False}}
    # sqlite в памяти живет, пока жив его коннект
    if url.database in (None, '', ':memory:'):
        options['poolclass'] = StaticPool
    return options


engine = create_engine(get_settings().db_url, echo=False, **_engine_options(get_settings().db_url))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def log_sql(conn, clauseelement, multiparams, params, execution_options):
    logger.debug(f'Executing SQL: {str(clauseelement)}')
    logger.debug(f'With params: {multiparams or params}')


if get_settings().log_sql:
    event.listen(Engine, 'before_execute', log_sql)


def create_tables():
    from cretaceous_park import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def drop_tables():
    Base.metadata.drop_all(bind=engine)


# Dependency
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
