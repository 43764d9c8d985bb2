"""
Assembles the curl argument list for a run.

Every URL becomes its own transfer block, chained with `--next` so that a
single curl process handles all of them. Flags that only newer curl releases
understand are gated through the rule tables below.
"""

import logging
from dataclasses import dataclass

from wcurl.models.config import Configuration
from wcurl.models.version import ToolVersion
from wcurl.utils.path import url_filename

log = logging.getLogger(__name__)

# Starts a fresh set of options for the next transfer.
NEXT_TRANSFER = "--next"

PER_URL_PARAMETERS = (
    "--fail",
    "--globoff",
    "--location",
    "--proto-default",
    "https",
    "--remote-time",
    "--retry",
    "5",
)


@dataclass(frozen=True)
class FeatureRule:
    """Flags that are passed only when curl is at least `minimum`."""

    name: str
    minimum: ToolVersion
    flags: tuple[str, ...]
    min_urls: int = 1

    def applies(self, version: ToolVersion, url_count: int) -> bool:
        return url_count >= self.min_urls and version >= self.minimum


# Emitted once, ahead of the first transfer.
SESSION_FEATURES = (
    FeatureRule("parallel", ToolVersion(7, 66), ("--parallel",), min_urls=2),
    FeatureRule(
        "parallel-max-host",
        ToolVersion(8, 16),
        ("--parallel-max-host", "5"),
        min_urls=2,
    ),
)

# Emitted inside every transfer block.
TRANSFER_FEATURES = (
    FeatureRule("no-clobber", ToolVersion(7, 83), ("--no-clobber",)),
)


def _feature_flags(
    rules: tuple[FeatureRule, ...], version: ToolVersion, url_count: int
) -> list[str]:
    flags: list[str] = []
    for rule in rules:
        if rule.applies(version, url_count):
            log.debug(f"Enabling {rule.name} (curl {version} >= {rule.minimum})")
            flags.extend(rule.flags)
        else:
            log.debug(f"Skipping {rule.name} for curl {version}")
    return flags


def build_curl_args(config: Configuration, version: ToolVersion) -> list[str]:
    """
    Builds the arguments (without the executable) for one curl invocation that
    downloads every URL in `config`.
    """
    url_count = len(config.urls)
    args = _feature_flags(SESSION_FEATURES, version, url_count)
    transfer_flags = _feature_flags(TRANSFER_FEATURES, version, url_count)

    no_clobber = "--no-clobber" in transfer_flags
    if config.has_user_set_output and url_count > 1 and not no_clobber:
        log.warning(
            f"curl {version} cannot number files sharing the output path "
            f"'{config.output_path}'; each download may overwrite the previous one."
        )

    for index, url in enumerate(config.urls):
        if index > 0:
            args.append(NEXT_TRANSFER)

        args.extend(PER_URL_PARAMETERS)
        args.extend(transfer_flags)

        if config.has_user_set_output:
            output = config.output_path
        else:
            output = url_filename(url, config.decode_filename)
        args.extend(("--output", output))

        args.extend(config.extra_options)
        args.append(url)

    return args
