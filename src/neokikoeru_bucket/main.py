"""Main CLI entry point for neokikoeru-bucket.

Runs the pipeline Resolve → Fetch → Map → Render once. Any failure stops
the run with exit status 1 and the error text on stderr; nothing is
written unless the release was fetched and mapped.
"""

import sys
from collections.abc import Mapping

import uvloop

from neokikoeru_bucket.bucket import build_bucket
from neokikoeru_bucket.config import Settings, load_settings
from neokikoeru_bucket.exceptions import BucketError
from neokikoeru_bucket.github import ReleaseAPIClient
from neokikoeru_bucket.http_session import create_http_session
from neokikoeru_bucket.logger import flush_all_handlers, get_logger
from neokikoeru_bucket.manifest import load_template, write_manifest

logger = get_logger(__name__)


async def generate_manifest(settings: Settings) -> None:
    """Fetch the release and write the manifest.

    Args:
        settings: Frozen run settings with a validated version

    Raises:
        BucketError: If any stage fails

    """
    async with create_http_session(settings.request_timeout) as session:
        client = ReleaseAPIClient(
            session,
            url_template=settings.release_url_template,
            timeout_seconds=settings.request_timeout,
        )
        release = await client.fetch_release_by_tag(settings.version)

    bucket = build_bucket(settings.version, release.assets)
    template = load_template(settings.template_path)
    write_manifest(template, bucket, settings.manifest_path)


async def async_main(environ: Mapping[str, str] | None = None) -> None:
    """Resolve settings and run the pipeline.

    The version is validated before any HTTP session exists, so an
    invalid version never reaches the network.
    """
    settings = load_settings(environ)
    logger.debug("Generating manifest for version %s", settings.version)
    await generate_manifest(settings)


def main() -> None:
    """Run the CLI application.

    Raises:
        SystemExit: With status 1 on any failure.

    """
    try:
        uvloop.run(async_main())
    except BucketError as e:
        logger.error("%s", e)  # noqa: TRY400
        flush_all_handlers()
        sys.exit(1)
    except KeyboardInterrupt:
        logger.error("Cancelled by user")
        flush_all_handlers()
        sys.exit(1)
    except Exception:
        logger.exception("Unexpected error")
        flush_all_handlers()
        sys.exit(1)

    flush_all_handlers()


if __name__ == "__main__":
    main()
