# catalog/sa/actions/volume.py
from typing import Any, Dict, Optional

from catalog.errors import BadRequest
from catalog.sa.actions.base import ScopedActions, catalog_action
from catalog.sa.links import AUTHOR_VOLUME, VOLUME_STORY
from catalog.sa.models import Volume
from catalog.sa.queries import VolumeQueries
from catalog.schemas import VolumeAllOptions, VolumeCreate, VolumeFindOptions, VolumeUpdate
from catalog.validators import validate_volume_location, validate_volume_type

VOLUME_AUTHOR = AUTHOR_VOLUME.reverse()


class VolumeActions(ScopedActions):
    kind = 'Volume'
    model = Volume
    queries = VolumeQueries()
    all_options = VolumeAllOptions
    find_options = VolumeFindOptions
    create_schema = VolumeCreate
    update_schema = VolumeUpdate

    def validate(self, values: Dict[str, Any], context: str) -> None:
        location = values.get('location')
        if location and not validate_volume_location(location):
            raise BadRequest(f"location: Location '{location}' is not a valid location", context)
        volume_type = values.get('type')
        if volume_type and not validate_volume_type(volume_type):
            raise BadRequest(f"type: Type '{volume_type}' is not a valid type", context)

    @catalog_action
    def author_connect(
        self, library_id: int, volume_id: int, author_id: int, principal: Optional[bool] = None
    ) -> Volume:
        return self._connect(VOLUME_AUTHOR, library_id, volume_id, author_id, 'author_connect', principal=principal)

    @catalog_action
    def author_disconnect(self, library_id: int, volume_id: int, author_id: int) -> Volume:
        return self._disconnect(VOLUME_AUTHOR, library_id, volume_id, author_id, 'author_disconnect')

    @catalog_action
    def story_connect(self, library_id: int, volume_id: int, story_id: int) -> Volume:
        return self._connect(VOLUME_STORY, library_id, volume_id, story_id, 'story_connect')

    @catalog_action
    def story_disconnect(self, library_id: int, volume_id: int, story_id: int) -> Volume:
        return self._disconnect(VOLUME_STORY, library_id, volume_id, story_id, 'story_disconnect')
