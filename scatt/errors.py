"""Exceptions raised by the scatt package."""


class ScattError(Exception):
    """Base exception for project analysis failures."""

    def __init__(self, message: str, detail: str = ""):
        self.message = message
        self.detail = detail
        super().__init__(message)

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


class ArchiveReadError(ScattError):
    """The project archive could not be read from storage."""


class NoManifestError(ScattError):
    """The archive was readable but holds no project.json."""


class UnknownSpriteError(ScattError, KeyError):
    """A sprite name was requested that the project does not define."""

    def __init__(self, sprite_name: str, project_name: str = ""):
        self.sprite_name = sprite_name
        self.project_name = project_name
        super().__init__(f"Sprite '{sprite_name}' not found", project_name)
