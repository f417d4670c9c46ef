"""SQLAlchemy ORM models for conversations and their participants.

Membership is a many-to-many relationship between users and conversations,
stored in a junction table. The owner is a plain foreign key on the
conversation row and never appears in the junction table.
"""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from infrastructure.database.models import Base, TimestampMixin


class ConversationModel(Base, TimestampMixin):
    """ORM model for conversations table.

    Foreign Key Constraint:
    - owner_id references users.id with RESTRICT delete
    - A user who owns conversations cannot be deleted until they are gone
    """

    __tablename__ = "conversations"

    id: Mapped[str] = mapped_column(String(26), primary_key=True)
    owner_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return f"<ConversationModel(id={self.id}, owner_id={self.owner_id})>"


class ConversationParticipantModel(Base):
    """ORM model for the conversation_participants junction table.

    position keeps the display order of participants; it is rewritten
    whenever membership changes so it always runs 0..n-1.
    """

    __tablename__ = "conversation_participants"

    conversation_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(26),
        ForeignKey("users.id", ondelete="RESTRICT"),
        primary_key=True,
        index=True,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<ConversationParticipantModel(conversation_id={self.conversation_id}, "
            f"user_id={self.user_id}, position={self.position})>"
        )
