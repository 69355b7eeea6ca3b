"""One-time provisioning: publish the note schemas and the ``notes`` definition."""

import asyncio
from pathlib import Path
from typing import Any

from loguru import logger

from ceramic_notes.ceramic.schemas import NOTE_SCHEMA, NOTES_LIST_SCHEMA
from ceramic_notes.config import IDX_DEFINITION_SCHEMA, NOTES_ALIAS, AppConfig, write_app_config
from ceramic_notes.protocols import DocumentProtocol, DocumentStoreProtocol


async def publish_schema(
    store: DocumentStoreProtocol, did: str, schema: dict[str, Any]
) -> DocumentProtocol:
    """Publish a JSON schema as a document controlled by ``did``."""
    doc = await store.create(schema, controllers=[did])
    logger.info("Published schema {} as {}", schema.get("title"), doc.commit_url)
    return doc


async def create_definition(
    store: DocumentStoreProtocol,
    did: str,
    *,
    name: str,
    description: str,
    schema: str,
    definition_schema: str | None = IDX_DEFINITION_SCHEMA,
) -> DocumentProtocol:
    """Create a directory definition pointing records at ``schema``."""
    doc = await store.create(
        {"name": name, "description": description, "schema": schema},
        controllers=[did],
        schema=definition_schema,
    )
    logger.info("Created definition {!r} as {}", name, doc.id)
    return doc


async def bootstrap(
    store: DocumentStoreProtocol,
    did: str,
    *,
    definition_schema: str | None = IDX_DEFINITION_SCHEMA,
) -> AppConfig:
    """Publish ``Note`` and ``NotesList``, create the ``notes`` definition.

    Returns:
        The config the application needs at runtime.
    """
    note_schema, notes_list_schema = await asyncio.gather(
        publish_schema(store, did, NOTE_SCHEMA),
        publish_schema(store, did, NOTES_LIST_SCHEMA),
    )
    notes_definition = await create_definition(
        store,
        did,
        name=NOTES_ALIAS,
        description="Simple text notes",
        schema=notes_list_schema.commit_url,
        definition_schema=definition_schema,
    )
    return AppConfig(
        definitions={NOTES_ALIAS: notes_definition.id},
        schemas={"Note": note_schema.commit_url, "NotesList": notes_list_schema.commit_url},
    )


async def run_bootstrap(
    store: DocumentStoreProtocol,
    did: str,
    output: Path,
    *,
    definition_schema: str | None = IDX_DEFINITION_SCHEMA,
) -> AppConfig:
    """Provision the network and write the resulting config to ``output``."""
    config = await bootstrap(store, did, definition_schema=definition_schema)
    write_app_config(output, config)
    logger.info("Config written to {}: {}", output, config.to_json())
    return config
