"""Classification of project folders."""

from enum import Enum


class FolderType(Enum):
    """Kind of root a folder is declared as in the project descriptor."""

    SOURCE = "source"
    TEST = "test"
    RESOURCES = "resources"
    TEST_RESOURCES = "test_resources"
    EXCLUDE = "exclude"
