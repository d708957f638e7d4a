"""
Upload request encoder CLI entry point.

Encode the want / shallow / deepen request a fetching client sends to
`git-upload-pack`, and write the pkt-line bytes to stdout or a file.

Usage::

    python -m git_wire --want 6ecf0ef2c2dffb796033e5a02219af86ec6584e5
    python -m git_wire --want <hash> --capability ofs-delta --deepen 1
    python -m git_wire --request request.yaml --output request.pkt
    python -m git_wire --request request.yaml --validate

Options:
    --request       Path to a YAML request file (excludes the request flags)
    --want          Wanted object hash (can be repeated)
    --shallow       Shallow boundary hash (can be repeated)
    --deepen        Commit depth limit
    --deepen-since  Depth limit as an ISO 8601 timestamp
    --deepen-not    Depth limit as an excluded reference
    --capability    Capability token, NAME or NAME=VALUE (can be repeated)
    --agent         Add the agent capability with this package's agent string
    --validate      Check capability consistency before encoding
    --output        Write to this file instead of stdout
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import IO

import yaml

from git_wire.capability import Capability, CapabilityList, default_agent
from git_wire.packp import (
    Depth,
    DepthCommits,
    DepthReference,
    DepthSince,
    UploadRequest,
    UploadRequestConfig,
    UploadRequestEncoder,
    parse_capability,
)
from git_wire.types import GitWireError, ObjectHash

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter that colors the level name."""

    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: "\x1b[38;5;244m",
        logging.INFO: "\x1b[38;5;40m",
        logging.WARNING: "\x1b[38;5;220m",
        logging.ERROR: "\x1b[38;5;196m",
        logging.CRITICAL: "\x1b[38;5;196;1m",
    }

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        return f"{color}{record.levelname:8}{self.RESET} {record.name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """
    Configure logging for the CLI with optional colors.

    Logs go to stderr so they never mix with the encoded bytes on stdout.
    """
    level = logging.DEBUG if verbose else logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter("%(levelname)-8s %(name)s: %(message)s")
    else:
        formatter = ColoredFormatter()

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def parse_depth(
    deepen: int | None,
    deepen_since: datetime | None,
    deepen_not: str | None,
) -> Depth:
    """
    Pick the depth variant from the mutually exclusive depth flags.

    No flag at all means no limit.
    """
    if deepen_since is not None:
        return DepthSince(deepen_since)
    if deepen_not is not None:
        return DepthReference(deepen_not)
    return DepthCommits(deepen or 0)


def uses_request_flags(args: argparse.Namespace) -> bool:
    """Check whether any flag that describes the request itself was given."""
    return bool(
        args.wants
        or args.shallows
        or args.capabilities
        or args.deepen is not None
        or args.deepen_since is not None
        or args.deepen_not is not None
    )


def build_request(args: argparse.Namespace) -> UploadRequest:
    """
    Build the request from a YAML file or from the command-line flags.

    Raises:
        CapabilityError: If a capability token breaks its argument rules.
        ValueError: If a hash is malformed.
    """
    if args.request is not None:
        logger.debug("Loading upload request from %s", args.request)
        request = UploadRequestConfig.from_yaml_file(args.request).to_upload_request()
    else:
        capabilities = CapabilityList()
        for token in args.capabilities:
            name, values = parse_capability(token)
            capabilities.add(name, *values)

        request = UploadRequest(
            wants=[ObjectHash(w) for w in args.wants],
            shallows=[ObjectHash(s) for s in args.shallows],
            depth=parse_depth(args.deepen, args.deepen_since, args.deepen_not),
            capabilities=capabilities,
        )

    if args.agent:
        request.capabilities.set(Capability.AGENT, default_agent())

    return request


def encode_request(request: UploadRequest, output: IO[bytes], validate: bool = False) -> None:
    """
    Encode `request` to `output`, validating it first when asked.

    Raises:
        GitWireError: If validation or encoding fails.
    """
    if validate:
        request.validate()

    UploadRequestEncoder(output).encode(request)


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-wire",
        description="Encode a git upload request as pkt-lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--request",
        type=Path,
        default=None,
        help="Path to a YAML request file",
    )
    parser.add_argument(
        "--want",
        action="append",
        default=[],
        dest="wants",
        help="Wanted object hash (can be repeated)",
    )
    parser.add_argument(
        "--shallow",
        action="append",
        default=[],
        dest="shallows",
        help="Shallow boundary hash (can be repeated)",
    )

    depth = parser.add_mutually_exclusive_group()
    depth.add_argument(
        "--deepen",
        type=int,
        default=None,
        help="Limit history to this many commits",
    )
    depth.add_argument(
        "--deepen-since",
        type=datetime.fromisoformat,
        default=None,
        help="Limit history to commits after this ISO 8601 timestamp",
    )
    depth.add_argument(
        "--deepen-not",
        type=str,
        default=None,
        help="Exclude history reachable from this reference",
    )

    parser.add_argument(
        "--capability",
        action="append",
        default=[],
        dest="capabilities",
        help="Capability token, NAME or NAME=VALUE (can be repeated)",
    )
    parser.add_argument(
        "--agent",
        action="store_true",
        help="Send the agent capability",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check capability consistency before encoding",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the encoded request to this file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.request is not None and uses_request_flags(args):
        parser.error("--request cannot be combined with the request flags")

    setup_logging(args.verbose, args.no_color)

    try:
        request = build_request(args)
        if args.output is not None:
            with args.output.open("wb") as f:
                encode_request(request, f, validate=args.validate)
            logger.info("Wrote upload request to %s", args.output)
        else:
            encode_request(request, sys.stdout.buffer, validate=args.validate)
            sys.stdout.buffer.flush()
    except (GitWireError, OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to encode upload request: %s", e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
