"""Request resolution: raw method + path + parameters -> `RequestIntent`.

Strategy:
    1) Tokenize the path and reject paths longer than the policy allows.
    2) If segment 0 is version-shaped, enforce the versioning policy and consume it.
    3) The next two segments are the module and scene names (lower-cased, `None` when absent).
    4) Parameters for the method are passed through the array-value sanitizer.

The versioning policy is snapshotted once at the start of every resolution, so a configuration
change mid-request cannot produce an inconsistent intent.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from reqintent.config.settings import ConfigSource
from reqintent.request.sanitizer import sanitize_parameters
from reqintent.request.schema import HttpMethod, RequestIntent, VersioningPolicy
from reqintent.request.source import RequestSource
from reqintent.request.tokenizer import tokenize_path
from reqintent.request.version import match_version

logger = logging.getLogger(__name__)


class RequestParseError(ValueError):
    """Base class for requests that cannot be interpreted."""


class StructuralRequestError(RequestParseError):
    """Raised when the request path (or method) does not have a viable shape."""


class VersioningPolicyViolation(RequestParseError):
    """Raised when a version segment is used in a way the versioning policy forbids."""


def _parse_method(method: str | HttpMethod) -> HttpMethod:
    try:
        return HttpMethod(str(method).upper())
    except ValueError as exc:
        raise StructuralRequestError(f"unsupported HTTP method: {method!r}") from exc


def _element(segments: Sequence[str], index: int) -> str | None:
    if index < len(segments):
        return segments[index].lower()
    return None


def _detect_version(segments: Sequence[str], policy: VersioningPolicy) -> float | None:
    """Return the requested API version, or `None` when segment 0 is not version-shaped."""

    if not segments:
        return None

    match = match_version(segments[0], policy.separator)
    if not match.matched:
        return None
    if not policy.allowed:
        raise VersioningPolicyViolation("versioning url address is not permitted")
    if not match.uses_separator(policy.separator):
        raise VersioningPolicyViolation(
            f'versioning number separator except for "{policy.separator}" is not supported'
        )

    version = match.version_number(policy.separator)
    if version <= 0:
        raise VersioningPolicyViolation(f"api version must be positive, got {version}")
    return version


class RequestResolver:
    """Interpret raw requests according to a versioning policy.

    The resolver holds no per-request state; one instance can serve concurrent requests.
    """

    def __init__(self, config_source: ConfigSource | None = None) -> None:
        self._config_source = config_source

    def current_policy(self) -> VersioningPolicy:
        """Snapshot the policy from the configured source (defaults when there is none)."""

        if self._config_source is None:
            return VersioningPolicy()
        return VersioningPolicy.from_config(self._config_source)

    def resolve(
            self,
            method: str | HttpMethod,
            raw_path: str | None,
            policy: VersioningPolicy | None = None,
            parameters: Mapping[str, Any] | None = None,
    ) -> RequestIntent:
        """Parse a raw request into a `RequestIntent`.

        Raises:
            StructuralRequestError: If the method is unknown or the path has too many segments.
            VersioningPolicyViolation: If a version segment violates the policy.
        """

        snapshot = policy if policy is not None else self.current_policy()
        verb = _parse_method(method)
        segments = tokenize_path(raw_path)

        try:
            if len(segments) > snapshot.max_segments:
                raise StructuralRequestError(
                    f"request path has {len(segments)} segments, at most "
                    f"{snapshot.max_segments} are allowed"
                )

            api_version = _detect_version(segments, snapshot)
            if (
                    api_version is None
                    and snapshot.strict_mode
                    and snapshot.require_version_segment
            ):
                raise VersioningPolicyViolation("strict versioning requires a version segment")
        except RequestParseError as exc:
            logger.info("rejected method=%s reason=%s", verb, exc)
            raise

        indexer = 0 if api_version is None else 1
        intent = RequestIntent(
            method=verb,
            api_version=api_version,
            module_name=_element(segments, indexer),
            scene_name=_element(segments, indexer + 1),
            parameters=sanitize_parameters(
                parameters,
                remove_array_values=snapshot.remove_array_params,
            ),
        )
        logger.debug(
            "resolved method=%s version=%s module=%s scene=%s params=%d",
            intent.method,
            intent.api_version,
            intent.module_name,
            intent.scene_name,
            len(intent.parameters),
        )
        return intent

    def resolve_request(
            self,
            source: RequestSource,
            policy: VersioningPolicy | None = None,
    ) -> RequestIntent:
        """Resolve a request read from a raw request source."""

        return self.resolve(
            source.method,
            source.path_info,
            policy=policy,
            parameters=source.parameters(source.method),
        )


def is_default_version(api_version: float | None, policy: VersioningPolicy) -> bool:
    """Whether the requested version is the configured default (no version counts as default)."""

    return api_version is None or api_version == policy.default_version


def requires_version_directory(api_version: float | None, policy: VersioningPolicy) -> bool:
    """Whether routing must look up an explicit version directory for this request."""

    return policy.strict_mode or not is_default_version(api_version, policy)
