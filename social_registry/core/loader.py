"""Bulk loading of client records into a network."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from social_registry.core.exceptions import (
    ConflictError,
    DuplicateNameError,
    LoadError,
    RecordFormatError,
    ValidationError,
)
from social_registry.models.client import Client, validate_name, validate_score
from social_registry.models.client_record import ClientRecord

logger = logging.getLogger(__name__)


@dataclass
class LoadReport:
    """Outcome of a bulk load."""

    loaded: int = 0
    warnings: List[str] = field(default_factory=list)

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)


def read_records(path: Union[str, Path]) -> List[ClientRecord]:
    """
    Read client records from a ``{"clients": [...]}`` JSON document.

    Args:
        path: Location of the JSON document

    Returns:
        The records in document order; empty if there is no client list

    Raises:
        LoadError: If the file is missing, not valid JSON or malformed
    """
    path = Path(path)
    if not path.is_file():
        raise LoadError(f"Data file not found: {path}")

    try:
        with path.open(encoding='utf-8') as f:
            document = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise LoadError(f"Invalid JSON in {path}: {str(e)}") from e

    if document is None:
        return []
    if not isinstance(document, dict):
        raise LoadError(f"Expected a JSON object in {path}")

    entries = document.get('clients')
    if not entries:
        return []
    if not isinstance(entries, list):
        raise LoadError(f"'clients' must be a list in {path}")

    try:
        return [ClientRecord.from_dict(entry) for entry in entries]
    except RecordFormatError as e:
        raise LoadError(f"Malformed client record in {path}: {str(e)}") from e


def _as_record(entry: Union[ClientRecord, Dict[str, Any]]) -> ClientRecord:
    if isinstance(entry, ClientRecord):
        return entry
    return ClientRecord.from_dict(entry)


def _validate(network, records: List[ClientRecord]) -> None:
    """Check the whole batch against the network before anything is created."""
    seen = set()
    for record in records:
        validate_name(record.name)
        validate_score(record.score)
        if record.name in network.clients or record.name in seen:
            raise DuplicateNameError(f"Duplicate client in load: {record.name}")
        seen.add(record.name)

        # Enforces no self-follow, no duplicates and the follow cap.
        probe = Client(record.name, record.score)
        for target in record.following:
            probe.follow(target)


def load_records(network, records: Iterable[Union[ClientRecord, Dict[str, Any]]]) -> LoadReport:
    """
    Load a batch of client records into *network*.

    The whole batch is validated before the first client is created, so a
    rejected load leaves the network untouched. Loaded clients are not
    recorded in the undo history. Follow and connection targets that do not
    exist are skipped and reported as warnings.

    Args:
        network: SocialNetwork receiving the clients
        records: ClientRecord instances or their dictionary form

    Returns:
        LoadReport with the number of loaded clients and any warnings

    Raises:
        LoadError: If any record is malformed, invalid or a duplicate
    """
    try:
        batch = [_as_record(entry) for entry in records]
        _validate(network, batch)
    except (ValidationError, ConflictError) as e:
        raise LoadError(f"Rejected bulk load: {str(e)}") from e

    report = LoadReport()
    for record in batch:
        network.register_client(record.name, record.score)
        report.loaded += 1

    for record in batch:
        follower = network.clients.require(record.name)
        for target_name in record.following:
            target = network.clients.get(target_name)
            if target is None:
                report.warn(f"Client {record.name!r} follows unknown client {target_name!r}; skipped")
                continue
            follower.follow(target_name)
            target.increment_followers()

    for record in batch:
        for other in record.connections:
            if other == record.name:
                report.warn(f"Client {record.name!r} lists itself as a connection; skipped")
                continue
            if other not in network.clients:
                report.warn(f"Client {record.name!r} has a connection to unknown client {other!r}; skipped")
                continue
            network.connect(record.name, other)

    logger.info(f"Loaded {report.loaded} clients with {len(report.warnings)} warnings")
    return report
