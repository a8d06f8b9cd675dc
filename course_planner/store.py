from neo4j import Driver, GraphDatabase
from neo4j.exceptions import DriverError, Neo4jError, ServiceUnavailable
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from course_planner.config import Settings
from course_planner.logger import logger


def get_db_credentials(settings: Settings):
    """Validate Neo4j credentials from settings.

    Raises:
        ValueError: if required settings are missing
    """
    if not settings.neo4j_uri:
        raise ValueError("Missing NEO4J_DB_URI. Did you set the env?")
    if not settings.neo4j_username or not settings.neo4j_password:
        raise ValueError(
            "Missing NEO4J_USERNAME or NEO4J_PASSWORD. Did you set the env?"
        )

    return settings.neo4j_uri, (settings.neo4j_username, settings.neo4j_password)


@retry(
    retry=retry_if_exception_type(ServiceUnavailable),
    stop=stop_after_attempt(3),
    wait=wait_exponential(multiplier=1, min=1, max=4),
    reraise=True,
)
def create_driver(uri, auth) -> Driver:
    """Create and verify a Neo4j driver connection.

    Args:
        uri: Neo4j database URI
        auth: tuple of (username, password)

    Raises:
        ServiceUnavailable: if the server is still unreachable after retries
    """
    driver = GraphDatabase.driver(uri, auth=auth)  # type: ignore
    try:
        driver.verify_connectivity()
    except Exception:
        driver.close()
        raise
    return driver


def ping_database(tx):
    return tx.run("RETURN 1 AS ok").single()


def check_store_connection(settings: Settings) -> bool:
    """Report whether the configured store can be opened.

    Errors are logged, never raised; no catalog data is written.
    """
    try:
        uri, auth = get_db_credentials(settings)
    except ValueError as err:
        logger.error(str(err))
        return False

    try:
        driver = create_driver(uri, auth)
    except (ValueError, DriverError, Neo4jError) as err:
        logger.error(f"Failed to connect to {uri}: {err}")
        return False

    try:
        with driver.session(database=settings.neo4j_database) as session:
            session.execute_read(ping_database)
    except (DriverError, Neo4jError) as err:
        logger.error(f"Failed to open database {settings.neo4j_database}: {err}")
        return False
    finally:
        driver.close()

    logger.info(f"Connected to {settings.neo4j_database} at {uri}")
    return True
