"""Registered record kinds."""

from mediarecords.core.modules.record.models import RecordField, RecordKind
from mediarecords.errors import NotFoundError

CAROUSEL = RecordKind(
    name="carousel",
    collection="carousel_images",
    folder="carousel",
    media_field="imageUrl",
    fields=(RecordField(form_name="link", stored_name="link", required=True),),
)

BLOG = RecordKind(
    name="blog",
    collection="blogs",
    folder="blogs",
    media_field="blog_image",
    fields=(
        RecordField(form_name="title", stored_name="blog_title", required=True),
        RecordField(form_name="description", stored_name="blog_description", required=True),
    ),
    sequence="blog_id",
    id_field="blog_id",
)

EVENT = RecordKind(
    name="event",
    collection="events",
    folder="events",
    media_field="imageUrl",
    fields=(
        RecordField(form_name="title", stored_name="title", required=True),
        RecordField(form_name="date", stored_name="date", required=True),
        RecordField(form_name="link", stored_name="link"),
        RecordField(form_name="description", stored_name="description"),
    ),
)

SONG = RecordKind(
    name="song",
    collection="songs",
    folder="songs",
    media_field="imageUrl",
    fields=(
        RecordField(form_name="title", stored_name="title", required=True),
        RecordField(form_name="link", stored_name="link", required=True),
    ),
)

ALBUM = RecordKind(
    name="album",
    collection="albums",
    folder="albums",
    media_field="imageUrl",
    fields=(
        RecordField(form_name="title", stored_name="title", required=True),
        RecordField(form_name="link", stored_name="link", required=True),
        RecordField(form_name="date", stored_name="date"),
    ),
)

FEATURE = RecordKind(
    name="feature",
    collection="features",
    folder="features",
    media_field="imageUrl",
    fields=(
        RecordField(form_name="title", stored_name="title", required=True),
        RecordField(form_name="link", stored_name="link"),
        RecordField(form_name="description", stored_name="description"),
    ),
)

RECORD_KINDS: dict[str, RecordKind] = {kind.name: kind for kind in (CAROUSEL, BLOG, EVENT, SONG, ALBUM, FEATURE)}


def get_record_kind(name: str) -> RecordKind:
    """Get a registered kind by name. Raises NotFoundError if unknown."""
    kind = RECORD_KINDS.get(name)
    if kind is None:
        raise NotFoundError(f"Unknown record kind: {name}")
    return kind
