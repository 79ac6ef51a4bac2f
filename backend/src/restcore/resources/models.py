from __future__ import annotations

from restcore.data.model import Model
from restcore.infra.db.models import ProjectRow, TagRow


class Project(Model):
    mapped = ProjectRow
    block_columns = ("id", "created_at", "updated_at")


class Tag(Model):
    mapped = TagRow
    block_columns = ("id",)
