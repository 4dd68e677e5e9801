"""
Iterator - Playlist

Q: How do you let callers walk through a playlist's songs without exposing
how the playlist stores them?
"""

from dataclasses import dataclass
from typing import List


@dataclass
class Song:
    title: str
    artist: str


class PlaylistIterator:
    def __init__(self, songs: List[Song]):
        self._songs = songs
        self._index = 0

    def has_next(self) -> bool:
        return self._index < len(self._songs)

    def __iter__(self) -> "PlaylistIterator":
        return self

    def __next__(self) -> Song:
        if not self.has_next():
            raise StopIteration
        song = self._songs[self._index]
        self._index += 1
        return song


class Playlist:
    def __init__(self, name: str):
        self.name = name
        self._songs: List[Song] = []

    def add(self, song: Song) -> None:
        self._songs.append(song)

    def __len__(self) -> int:
        return len(self._songs)

    def __iter__(self) -> PlaylistIterator:
        # each call starts a fresh traversal
        return PlaylistIterator(self._songs)


def demo() -> List[str]:
    playlist = Playlist("Road Trip")
    playlist.add(Song("Bohemian Rhapsody", "Queen"))
    playlist.add(Song("Hotel California", "Eagles"))
    playlist.add(Song("Africa", "Toto"))

    played = []
    for song in playlist:
        print(f"Now playing: {song.title} by {song.artist}")
        played.append(song.title)
    return played
