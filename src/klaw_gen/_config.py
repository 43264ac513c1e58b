"""Run configuration: GenConfig fluent settings, profiles, and initialization."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING, Any

import hypothesis
from hypothesis import Verbosity, settings

from klaw_gen._logging import bind_profile, configure_logging, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'PROFILES',
    'GenConfig',
    'get_config',
    'init',
    'register_profile',
]

logger = get_logger(__name__)

PROFILE_ENV_VAR = 'KLAW_GEN_PROFILE'
MAX_EXAMPLES_ENV_VAR = 'KLAW_GEN_MAX_EXAMPLES'
PROFILE_PREFIX = 'klaw-gen:'


@dataclass(frozen=True)
class GenConfig:
    """Settings for running property tests against klaw-gen strategies.

    Every ``with_*`` method returns a new config; instances are never mutated.

    Attributes:
        max_examples: Number of examples Hypothesis tries per test.
        seed: Fixed seed for reproducible runs. None = random.
        derandomize: Derive the seed from the test itself.
        deadline_ms: Per-example time limit in milliseconds. None = no limit.
        verbosity: Hypothesis verbosity name ("quiet", "normal", "verbose", "debug").
        database: Whether failing examples are saved and replayed.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.

    Example:
        ```python
        config = GenConfig().with_max_examples(500).with_seed(1234)

        @config.apply
        @given(pick_values(2, 'ABCDE'))
        def test_pairs(pair): ...
        ```
    """

    max_examples: int = 100
    seed: int | None = None
    derandomize: bool = False
    deadline_ms: float | None = 200.0
    verbosity: str = 'normal'
    database: bool = True
    log_level: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, 'verbosity', self.verbosity.lower())
        if self.max_examples < 1:
            msg = f'max_examples must be at least 1, got {self.max_examples}'
            raise ValueError(msg)
        if self.deadline_ms is not None and self.deadline_ms <= 0:
            msg = f'deadline_ms must be positive or None, got {self.deadline_ms}'
            raise ValueError(msg)
        if self.verbosity not in Verbosity.__members__:
            msg = f'Unknown verbosity {self.verbosity!r}, expected one of {sorted(Verbosity.__members__)}'
            raise ValueError(msg)

    def with_max_examples(self, max_examples: int) -> GenConfig:
        return dataclasses.replace(self, max_examples=max_examples)

    def with_seed(self, seed: int | None) -> GenConfig:
        return dataclasses.replace(self, seed=seed)

    def with_derandomize(self, derandomize: bool = True) -> GenConfig:
        return dataclasses.replace(self, derandomize=derandomize)

    def with_deadline(self, deadline_ms: float | None) -> GenConfig:
        return dataclasses.replace(self, deadline_ms=deadline_ms)

    def with_verbosity(self, verbosity: str) -> GenConfig:
        return dataclasses.replace(self, verbosity=verbosity)

    def with_database(self, database: bool) -> GenConfig:
        return dataclasses.replace(self, database=database)

    def with_log_level(self, log_level: str | None) -> GenConfig:
        return dataclasses.replace(self, log_level=log_level)

    def to_settings(self) -> settings:
        """Build the equivalent ``hypothesis.settings``."""
        kwargs: dict[str, Any] = {
            'max_examples': self.max_examples,
            'derandomize': self.derandomize,
            'deadline': None if self.deadline_ms is None else timedelta(milliseconds=self.deadline_ms),
            'verbosity': Verbosity[self.verbosity],
        }
        if not self.database:
            kwargs['database'] = None
        return settings(**kwargs)

    def apply[F: Callable[..., Any]](self, test: F) -> F:
        """Decorate a ``@given`` test with these settings and, if set, the seed."""
        wrapped = self.to_settings()(test)
        if self.seed is not None:
            wrapped = hypothesis.seed(self.seed)(wrapped)
        return wrapped


PROFILES: dict[str, GenConfig] = {
    'default': GenConfig(),
    'dev': GenConfig(max_examples=10),
    'ci': GenConfig(max_examples=1000, derandomize=True, deadline_ms=None, database=False),
    'debug': GenConfig(max_examples=10, verbosity='verbose', log_level='DEBUG'),
}

# Active configuration (set by init())
_config: GenConfig | None = None


def register_profile(name: str, config: GenConfig) -> str:
    """Register ``config`` as a named profile, in klaw-gen and in Hypothesis.

    Returns:
        The Hypothesis profile name, ``"klaw-gen:<name>"``.
    """
    PROFILES[name] = config
    hypothesis_name = f'{PROFILE_PREFIX}{name}'
    settings.register_profile(hypothesis_name, config.to_settings())
    return hypothesis_name


def _detect_profile() -> str:
    """Detect the profile name from the environment.

    Priority:
    1. KLAW_GEN_PROFILE environment variable, if it names a known profile
    2. "default"
    """
    env_profile = os.environ.get(PROFILE_ENV_VAR, '').lower()
    if env_profile in PROFILES:
        return env_profile
    if env_profile:
        logging.warning("Unknown %s value '%s', defaulting to 'default'", PROFILE_ENV_VAR, env_profile)
    return 'default'


def _detect_max_examples() -> int | None:
    """Read a max_examples override from KLAW_GEN_MAX_EXAMPLES, if valid."""
    raw = os.environ.get(MAX_EXAMPLES_ENV_VAR, '').strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logging.warning("Ignoring non-integer %s value '%s'", MAX_EXAMPLES_ENV_VAR, raw)
        return None
    if value < 1:
        logging.warning("Ignoring non-positive %s value '%s'", MAX_EXAMPLES_ENV_VAR, raw)
        return None
    return value


def init(profile: str | None = None, **overrides: Any) -> GenConfig:
    """Select, register and load the configuration for this test session.

    Args:
        profile: Profile name. Detected from KLAW_GEN_PROFILE if None.
        **overrides: GenConfig fields to override on top of the profile.

    Returns:
        The GenConfig that was loaded.

    Raises:
        KeyError: If ``profile`` is given explicitly and is not registered.

    Example:
        ```python
        # conftest.py
        from klaw_gen import init

        init()  # honours KLAW_GEN_PROFILE, e.g. "ci"
        init('dev', log_level='INFO')
        ```
    """
    global _config  # noqa: PLW0603

    name = _detect_profile() if profile is None else profile
    if name not in PROFILES:
        msg = f"Unknown profile '{name}', registered profiles: {sorted(PROFILES)}"
        raise KeyError(msg)

    config = PROFILES[name]
    max_examples = _detect_max_examples()
    if max_examples is not None:
        config = config.with_max_examples(max_examples)
    if overrides:
        config = dataclasses.replace(config, **overrides)

    if config.log_level is not None:
        configure_logging(config.log_level)

    hypothesis_name = f'{PROFILE_PREFIX}{name}'
    settings.register_profile(hypothesis_name, config.to_settings())
    settings.load_profile(hypothesis_name)
    bind_profile(name, config.max_examples)
    _config = config

    logger.info('klaw_gen_initialized', profile=name, max_examples=config.max_examples)
    return config


def get_config() -> GenConfig:
    """Get the active configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-gen not initialized. Call klaw_gen.init() first.'
        raise RuntimeError(msg)
    return _config
