"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tour.config import Settings
from tour.domain.repository import (
    CommentRepository,
    InvitationOTPRepository,
    InvitationRepository,
    ParticipantRepository,
    TagRepository,
    TourActivityRepository,
    TourRepository,
    UserRepository,
    VoteRepository,
)
from tour.persistence.database import create_engine, create_session_factory
from tour.persistence.repository import (
    PostgresCommentRepository,
    PostgresInvitationOTPRepository,
    PostgresInvitationRepository,
    PostgresParticipantRepository,
    PostgresTagRepository,
    PostgresTourActivityRepository,
    PostgresTourRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from tour.util.di.base import ProviderBase
from tour.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories over one session per request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        # Disposed when the container closes (application shutdown)
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Unit of work for one request.

        Everything a use case wrote is committed together when the request
        scope closes, or rolled back if an exception escapes the scope.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn(
                    "Request transaction rolled back",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            await session.commit()
            logfire.debug("Request transaction committed")

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tour_repository(self, session: AsyncSession) -> TourRepository:
        return PostgresTourRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_participant_repository(
        self, session: AsyncSession
    ) -> ParticipantRepository:
        return PostgresParticipantRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_repository(self, session: AsyncSession) -> InvitationRepository:
        return PostgresInvitationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_invitation_otp_repository(
        self, session: AsyncSession
    ) -> InvitationOTPRepository:
        return PostgresInvitationOTPRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tour_activity_repository(
        self, session: AsyncSession
    ) -> TourActivityRepository:
        return PostgresTourActivityRepository(session)
