"""robot-tokens — list the authentication tokens of an organization robot.

Resolves a robot by name inside an organization account, fetches its
tokens and renders them as a table with relative creation ages.
"""

from robot_tokens.version import __version__

__all__: list[str] = ["__version__"]
