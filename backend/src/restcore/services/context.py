from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from sqlalchemy.orm import Session

from restcore.services.messages import MessageBag
from restcore.settings import Settings

if TYPE_CHECKING:
    from restcore.services.resolver import ResourceRegistry
    from restcore.services.transaction import TransactionState


@dataclass
class RequestContext:
    """Everything one request hands to the controller and the data layer.

    A context is built per request and never shared between requests.
    """

    db: Session
    settings: Settings
    registry: ResourceRegistry
    transaction: TransactionState
    body: Any = None
    message_bag: MessageBag = field(default_factory=MessageBag)
