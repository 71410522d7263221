from abc import ABC, abstractmethod
from typing import Sequence, Union

from pathtree.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules deciding which scanned entries stay out of the tree.

    The directory scanner asks ``exclude`` about every entry it finds, passing the
    entry's path relative to the scanned root with forward slashes; directories
    carry a trailing ``/`` so that directory-only patterns can match them.
    Loading rules from files and adding single rules are optional capabilities.

    Example:
        >>> from pathtree.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("build/")
        >>> rules.exclude("build/")
        True
        >>> rules.exclude("src/")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine whether a path should be left out of the tree.

        Args:
            path (str): Path relative to the scanned root, using forward slashes.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load rules from one or more files.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single rule.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
