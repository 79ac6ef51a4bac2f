from restcore.data.entity import Entity
from restcore.data.model import Model
from restcore.data.result import Result
from restcore.data.search import SearchHelper

__all__ = [
    "Entity",
    "Model",
    "Result",
    "SearchHelper",
]
