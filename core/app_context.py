from dataclasses import dataclass

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.catalog import Catalog, load_catalog
from core.config_loader import AppConfig
from core.matcher import MatcherService
from core.provide import ProvideFlow
from database.store import Store


@dataclass
class AppContext:
    """Application context container that holds all wired dependencies.

    Provides a single source of truth for service instantiation. DB access
    is obtained per turn through store_uow(session_factory); services that
    need the store are built on that per-turn Store.
    """
    config: AppConfig
    catalog: Catalog
    engine: Engine
    session_factory: sessionmaker

    @classmethod
    def build(cls, config: AppConfig) -> "AppContext":
        """Build an AppContext from config.

        Args:
            config: Loaded application configuration

        Returns:
            Fully wired AppContext instance (no DB session attached)
        """
        catalog = load_catalog(config.resolve_path(config.catalog.schema_file))

        engine = create_engine(config.database.url, echo=config.database.echo)
        session_factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)

        return cls(
            config=config,
            catalog=catalog,
            engine=engine,
            session_factory=session_factory
        )

    def matcher(self, store: Store) -> MatcherService:
        return MatcherService(store, self.catalog, self.config.matching)

    def provide_flow(self, store: Store) -> ProvideFlow:
        return ProvideFlow(
            store=store,
            catalog=self.catalog,
            matcher=self.matcher(store),
            config=self.config.conversation
        )
