"""Demo run of the client registry."""

import logging

from social_registry import config
from social_registry.core.exceptions import RegistryError, ValidationError
from social_registry.core.loader import read_records
from social_registry.core.network import SocialNetwork
from social_registry.models.client_record import ClientRecord

logger = logging.getLogger(__name__)

# Sample data used when no data file is configured
SAMPLE_RECORDS = [
    ClientRecord("Ana", 95, following=["Bob"], connections=["Bob", "Carla"]),
    ClientRecord("Bob", 80, connections=["Diego"]),
    ClientRecord("Carla", 70, following=["Ana", "Bob"]),
    ClientRecord("Diego", 88, connections=["Eva"]),
    ClientRecord("Eva", 60),
]


def run(network: SocialNetwork, report_depth: int, history_limit: int) -> None:
    """Exercise the headline operations and log what they return."""
    ranged = network.range_by_score(0, 100)
    logger.info(f"Clients with score in [0, 100]: {[client.name for client in ranged]}")

    names = [client.name for client in ranged]
    if len(names) >= 2:
        first, second = names[0], names[1]
        network.request_follow(first, second)
        network.request_follow(second, first)
        logger.info(f"Pending follow requests: {network.pending_count()}")
        while (request := network.process_next_request()) is not None:
            logger.info(f"Processing follow request {request}")
            try:
                network.confirm_follow(request.requester, request.target)
            except ValidationError as e:
                logger.warning(f"Follow request {request} rejected: {str(e)}")
                continue
            target = network.lookup_by_name(request.target)
            logger.info(f"{request.requester} follows {request.target}; followers: {target.followers_count}")

        logger.info(f"Distance {names[0]} -> {names[-1]}: {network.distance(names[0], names[-1])}")

    if network.lookup_by_name("Demo") is None:
        network.add_client("Demo", 42)
        logger.info(f"Clients after adding Demo: {network.count()}")
        undone = network.undo()
        logger.info(f"Undid {undone.type.value} -> {undone.detail}; clients now {network.count()}")

    ranked = network.ranked_at_depth(report_depth)
    logger.info(f"Score tree depth {report_depth} by followers: {[client.name for client in ranked]}")
    logger.info(f"Recent actions: {[action.detail for action in network.history(history_limit)]}")


def main() -> int:
    logging.basicConfig(level=config.log_level())

    network = SocialNetwork()
    try:
        path = config.data_file()
        records = read_records(path) if path is not None else SAMPLE_RECORDS
        report = network.load(records)
        logger.info(f"Loaded {report.loaded} clients")
        run(network, config.report_depth(), config.history_limit())
    except RegistryError as e:
        logger.error(f"Demo failed: {str(e)}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
