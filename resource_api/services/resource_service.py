"""
Resource API - Resource Service
=================================

What:  Reads and creates rows of the `resources` table.
Who:   Called by the resources router.

Query plans:
    list_resources:  SELECT * FROM resources ORDER BY resource_id DESC
    get_resource:    SELECT * FROM resources WHERE resource_id = :id
    create_resource: INSERT INTO resources (...) VALUES (...)
"""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from resource_api.exceptions import NotFoundError
from resource_api.models.resource import Resource
from resource_api.schemas.resource import ResourceCreate, ResourceRow
from resource_api.services.base import translate_db_errors

logger = logging.getLogger(__name__)


class ResourceService:

    async def list_resources(self, db: AsyncSession) -> List[ResourceRow]:
        """All resources, newest (highest resource_id) first."""
        with translate_db_errors("list_resources"):
            result = await db.execute(
                select(Resource).order_by(Resource.resource_id.desc())
            )
            resources = result.scalars().all()

        return [ResourceRow.model_validate(r) for r in resources]

    async def get_resource(self, db: AsyncSession, resource_id: int) -> ResourceRow:
        """
        Raises:
            NotFoundError: no resource with this id (→ 404)
        """
        with translate_db_errors("get_resource", resource_id=resource_id):
            result = await db.execute(
                select(Resource).where(Resource.resource_id == resource_id)
            )
            resource = result.scalar_one_or_none()

        if resource is None:
            raise NotFoundError(resource="resource", resource_id=str(resource_id))
        return ResourceRow.model_validate(resource)

    async def create_resource(self, db: AsyncSession, payload: ResourceCreate) -> ResourceRow:
        """
        Insert a resource and commit.

        The commit happens here (not in the session dependency) so the caller
        can dispatch the creation notification knowing the row is durable.
        """
        resource = Resource(**payload.model_dump())

        with translate_db_errors("create_resource", user_id=payload.user_id):
            db.add(resource)
            await db.flush()
            await db.commit()

        logger.info(
            "Resource %s created by user %s: %s",
            resource.resource_id,
            resource.user_id,
            resource.resource_name,
        )
        return ResourceRow.model_validate(resource)


resource_service = ResourceService()
