import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from patternbook.db.models import Base
from patternbook.examples.creational.singleton import ConnectionPool
from patternbook.patterns import PatternRegistry, register_all_patterns, reset_pattern_registry


@pytest.fixture
def registry():
    """A fresh registry holding the built-in catalog"""
    reg = PatternRegistry()
    register_all_patterns(reg)
    return reg


@pytest.fixture(autouse=True)
def clean_globals():
    reset_pattern_registry()
    ConnectionPool.reset_instance()
    yield
    reset_pattern_registry()
    ConnectionPool.reset_instance()


@pytest.fixture
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(db_engine):
    Session = sessionmaker(bind=db_engine, autocommit=False, autoflush=False)
    session = Session()
    yield session
    session.close()
