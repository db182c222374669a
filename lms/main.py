"""
Main entry point for the terminal LMS.
"""

import logging
import sys
from typing import Any, Dict, Optional, Union

from .config import LMSConfig, load_config
from .console import Console, run_session
from .core.entities import Course, User
from .core.exceptions import ConfigurationError, LMSException
from .services import LMSContext

logger = logging.getLogger(__name__)


class LMSApplication:
    """Builds the registries, seeds them and runs the console session."""

    def __init__(self, config: Union[LMSConfig, Dict[str, Any], None] = None,
                 console: Optional[Console] = None):
        self._config: LMSConfig = load_config(config)
        self._console = console or Console()
        self._context = LMSContext()

        self._seed()

    @property
    def context(self) -> LMSContext:
        return self._context

    @property
    def config(self) -> LMSConfig:
        return self._config

    def _seed(self) -> None:
        """Load the configured users and courses into the registries."""
        try:
            self._load_seed_data()
        except LMSException as e:
            raise ConfigurationError(f"Invalid seed data: {e.message}", error_code="invalid_seed",
                                     details={"cause": e.error_code}) from e

        logger.info("Seeded %d courses and %d users",
                    len(self._context.courses), len(self._context.users))

    def _load_seed_data(self) -> None:
        for seed_course in self._config.seed_courses:
            course = Course(seed_course.name, seed_course.teacher_email)
            for content in seed_course.contents:
                course.add_content(content)
            self._context.courses.add_course(course)

        for seed_user in self._config.seed_users:
            self._context.users.register(
                User(seed_user.username, seed_user.email, seed_user.password, seed_user.role)
            )

    def run(self) -> int:
        """Run the login loop. Returns the process exit status."""
        try:
            return run_session(self._console, self._context)
        except EOFError:
            self._console.write("\nExiting program...")
            return 0


def main() -> int:
    """Console entry point. No flags or environment variables are read."""
    try:
        config = load_config()
        logging.basicConfig(
            level=config.log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        return LMSApplication(config).run()
    except KeyboardInterrupt:
        print("\nExiting program...")
        return 0
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
