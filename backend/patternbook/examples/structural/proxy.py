"""
Proxy - Lazy-loading images

Q: Loading a high-resolution image from disk is slow, and most images in a
gallery are never opened. How do you defer the expensive load until the image
is actually displayed, and keep a record of who looked at it?
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class Image(ABC):
    @abstractmethod
    def display(self) -> str:
        pass


class RealImage(Image):
    def __init__(self, filename: str):
        self.filename = filename
        self._load_from_disk()

    def _load_from_disk(self) -> None:
        print(f"Loading {self.filename} from disk")

    def display(self) -> str:
        message = f"Displaying {self.filename}"
        print(message)
        return message


class ImageProxy(Image):
    """Creates the RealImage on first display and logs every access"""

    def __init__(self, filename: str):
        self.filename = filename
        self._real_image: Optional[RealImage] = None
        self.load_count = 0
        self.access_log: List[str] = []

    @property
    def is_loaded(self) -> bool:
        return self._real_image is not None

    def display(self) -> str:
        if self._real_image is None:
            self._real_image = RealImage(self.filename)
            self.load_count += 1
        self.access_log.append(self.filename)
        return self._real_image.display()


def demo() -> dict:
    gallery = [ImageProxy("holiday_001.png"), ImageProxy("holiday_002.png")]
    print(f"Gallery created, loaded images: {sum(p.is_loaded for p in gallery)}")

    first = gallery[0]
    first.display()
    first.display()
    return {
        "loads": first.load_count,
        "accesses": len(first.access_log),
        "second_loaded": gallery[1].is_loaded,
    }
