"""Download of the VSOP87 coefficient files from a catalogue mirror."""

from pathlib import Path
from typing import Iterable, List, Optional, Union

import requests

from . import config
from .body import ELLIPTIC_BODIES, Body
from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 120


def download_file(
    url: str,
    destination: Path,
    session: Optional[requests.Session] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Path:
    """Fetch one file and write it to destination.

    Raises:
        requests.HTTPError: If the server answers with an error status
        requests.RequestException: On connection problems
    """
    getter = session.get if session is not None else requests.get
    try:
        response = getter(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        logger.error(f"Error downloading {url}: {e}")
        raise

    # destination only ever holds a complete file
    partial = destination.with_name(destination.name + ".part")
    partial.write_bytes(response.content)
    partial.replace(destination)
    logger.debug(f"Downloaded {url} ({len(response.content)} bytes)")
    return destination


def download_coefficient_files(
    directory: Optional[Union[str, Path]] = None,
    base_url: Optional[str] = None,
    bodies: Iterable[Body] = ELLIPTIC_BODIES,
    include_check_file: bool = True,
    overwrite: bool = False,
    session: Optional[requests.Session] = None,
) -> List[Path]:
    """Download the VSOP87.<ext> files (and vsop87.chk) into a directory.

    Args:
        directory: Target directory, created if needed. Defaults to the
            configured data directory.
        base_url: Mirror URL. Defaults to the configured mirror.
        bodies: Bodies whose coefficient files are fetched
        include_check_file: Also fetch vsop87.chk
        overwrite: Fetch files even when they already exist
        session: Optional requests session to reuse

    Returns:
        Paths of all requested files, fetched or already present
    """
    directory = Path(directory) if directory is not None else config.get_data_dir()
    if base_url is None:
        base_url = config.get_base_url()
    elif not base_url.endswith("/"):
        base_url += "/"
    directory.mkdir(parents=True, exist_ok=True)

    names = [body.file_name for body in bodies]
    if include_check_file:
        names.append(config.CHECK_FILE_NAME)

    paths = []
    for name in names:
        destination = directory / name
        if destination.exists() and not overwrite:
            logger.info(f"{destination} already present, skipping")
        else:
            logger.info(f"Downloading {name} to {directory}")
            download_file(f"{base_url}{name}", destination, session=session)
        paths.append(destination)
    return paths
