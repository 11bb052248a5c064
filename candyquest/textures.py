"""Loading and keeping track of image textures."""

from __future__ import annotations

import logging
import os
from typing import Callable, List, Optional, Tuple, Union

import pygame

log = logging.getLogger(__name__)


class TextureError(Exception):
    """Raised when an image cannot be turned into a texture."""


class Textures:
    """Owns every texture loaded through it until it is unloaded."""

    def __init__(self, loader: Optional[Callable[[str], pygame.Surface]] = None) -> None:
        self._loader = loader or pygame.image.load
        self.textures: List[pygame.Surface] = []

    def __len__(self) -> int:
        return len(self.textures)

    def __contains__(self, texture: object) -> bool:
        return any(item is texture for item in self.textures)

    def load(self, path: Union[str, "os.PathLike[str]"]) -> pygame.Surface:
        """Load an image file and register it as a texture."""
        try:
            surface = self._loader(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"could not load surface with path {path}: {exc}") from exc
        return self.load_surface(surface)

    def load_surface(self, surface: pygame.Surface) -> pygame.Surface:
        """Register a copy of ``surface`` as a texture and return it."""
        if surface is None:
            raise TextureError("unable to create a texture from a missing surface")
        texture = surface.copy()
        self.textures.append(texture)
        return texture

    def unload(self, texture: pygame.Surface) -> bool:
        """Forget ``texture``; return False if it was not loaded here."""
        for index, item in enumerate(self.textures):
            if item is texture:
                del self.textures[index]
                return True
        return False

    def size(self, texture: pygame.Surface) -> Tuple[int, int]:
        return texture.get_size()

    def clean_up(self) -> bool:
        log.debug("Freeing textures")
        self.textures.clear()
        return True