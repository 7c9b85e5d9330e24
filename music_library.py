from typing import List
from datetime import date
from enum import Enum
import copy
import logging
import random
import weakref


logger = logging.getLogger(__name__)


# ==================== Configuration ====================

ID_LENGTH = 24
ID_ALPHABET = "0123456789abcdef"
SEPARATOR = "<------------------------------->"
LOG_LEVEL = logging.WARNING


# ==================== Enums ====================

class Visibility(Enum):
    """Sharing state of a track"""
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


# ==================== Utilities ====================

class IdGenerator:
    """Random hex identifiers. Collisions are possible and not checked."""

    @staticmethod
    def generate() -> str:
        """Generate a new identifier"""
        return "".join(random.choices(ID_ALPHABET, k=ID_LENGTH))


class DurationFormatter:
    """
    Converts second counts to display strings and back.

    Hours are left out when zero ("03:30"), otherwise they are written
    unpadded in front of zero-padded minutes and seconds ("1:01:01").
    """

    @staticmethod
    def format(total_seconds: int) -> str:
        """Format seconds as MM:SS or H:MM:SS"""
        if total_seconds < 0:
            raise ValueError(f"Duration must be non-negative, got {total_seconds}")

        hours, remainder = divmod(total_seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        if hours > 0:
            return f"{hours}:{minutes:02d}:{seconds:02d}"
        return f"{minutes:02d}:{seconds:02d}"

    @staticmethod
    def parse(text: str) -> int:
        """Parse MM:SS or H:MM:SS back into seconds"""
        parts = text.strip().split(":")
        if len(parts) not in (2, 3) or not all(part.isdigit() for part in parts):
            raise ValueError(f"Invalid duration: {text!r}")

        values = [int(part) for part in parts]
        if len(values) == 2:
            values.insert(0, 0)
        hours, minutes, seconds = values

        if minutes >= 60 or seconds >= 60:
            raise ValueError(f"Invalid duration: {text!r}")

        return hours * 3600 + minutes * 60 + seconds


# ==================== Core Models ====================

class Track:
    """
    A single audio item.

    The owner is held through a weak reference: a track never keeps its
    user alive, and asking for the owner after the user is gone raises
    ReferenceError.
    """

    def __init__(self, title: str, owner: 'User', duration_seconds: int = 0):
        if duration_seconds < 0:
            raise ValueError(f"Duration must be non-negative, got {duration_seconds}")

        self._track_id = IdGenerator.generate()
        self._title = title
        self._duration_seconds = duration_seconds
        self._visibility = Visibility.PUBLIC
        self._owner = weakref.ref(owner)
        self._release_date = date.today()

        logger.debug("Created track %s (%s)", self._track_id, title)

    def __copy__(self) -> 'Track':
        # A copy is a distinct track, so it gets its own id
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._track_id = IdGenerator.generate()
        return clone

    def copy(self) -> 'Track':
        """Copy this track under a new id"""
        return copy.copy(self)

    def get_id(self) -> str:
        return self._track_id

    def get_title(self) -> str:
        return self._title

    def get_duration(self) -> int:
        return self._duration_seconds

    def get_visibility(self) -> Visibility:
        return self._visibility

    def set_visibility(self, visibility: Visibility) -> None:
        self._visibility = visibility

    def get_release_date(self) -> date:
        return self._release_date

    def get_owner(self) -> 'User':
        """Get the owning user, failing if it no longer exists"""
        owner = self._owner()
        if owner is None:
            raise ReferenceError(f"Owner of track {self._track_id} no longer exists")
        return owner

    def get_owner_name(self) -> str:
        """Get the owner's username"""
        return self.get_owner().get_username()

    get_track_owner = get_owner_name

    def render(self) -> str:
        """Multi-line report of this track"""
        lines = [
            f"\tTrack ID: {self._track_id}",
            f"\tOwner: {self.get_owner_name()}",
            f"\tTitle: {self._title}",
            f"\tVisibility: {self._visibility.value}",
            f"\tDuration: {DurationFormatter.format(self._duration_seconds)}",
        ]
        return "\n".join(lines) + "\n\n"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Track(id={self._track_id}, title={self._title})"


class Playlist:
    """Ordered collection of tracks. The playlist owns the tracks it holds."""

    def __init__(self, title: str, description: str = ""):
        self._playlist_id = IdGenerator.generate()
        self._title = title
        self._description = description
        self._tracks: List[Track] = []
        self._duration_seconds = 0

        logger.debug("Created playlist %s (%s)", self._playlist_id, title)

    def __copy__(self) -> 'Playlist':
        # Same playlist, but every track is copied so nothing is shared
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        clone._tracks = [copy.copy(track) for track in self._tracks]
        return clone

    def get_id(self) -> str:
        return self._playlist_id

    def get_title(self) -> str:
        return self._title

    def get_description(self) -> str:
        return self._description

    def add_track(self, track: Track) -> None:
        """Add track and take ownership of it"""
        self._tracks.append(track)
        self._duration_seconds += track.get_duration()
        logger.debug("Added track %s to playlist %s", track.get_id(), self._playlist_id)

    def create_track(self, title: str, owner: 'User',
                     duration_seconds: int = 0) -> Track:
        """Create a track directly inside this playlist"""
        track = Track(title, owner, duration_seconds)
        self.add_track(track)
        return track

    def get_tracks(self) -> List[Track]:
        """Get all tracks in insertion order"""
        return self._tracks.copy()

    def get_track_count(self) -> int:
        return len(self._tracks)

    def get_duration(self) -> int:
        """Get total duration in seconds"""
        return self._duration_seconds

    def release(self) -> None:
        """Drop every contained track"""
        logger.debug("Releasing %d tracks from playlist %s",
                     len(self._tracks), self._playlist_id)
        self._tracks.clear()
        self._duration_seconds = 0

    def render(self) -> str:
        """Report of this playlist and its tracks"""
        parts = [f"Playlist ID: {self._playlist_id}\n",
                 f"Title: {self._title}\n"]
        if self._description:
            parts.append(f"Description: {self._description}\n")
        parts.append(f"Duration: {DurationFormatter.format(self._duration_seconds)}\n")
        parts.append("Tracks:\n")
        parts.extend(track.render() for track in self._tracks)
        parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Playlist(id={self._playlist_id}, title={self._title}, tracks={len(self._tracks)})"


# ==================== User Models ====================

class User:
    """Account holder. Playlists are stored by value."""

    def __init__(self, username: str):
        self._user_id = IdGenerator.generate()
        self._username = username
        self._hashed_password = ""  # hashing not supported
        self._playlists: List[Playlist] = []
        self._playlist_count = 0

        logger.debug("Created user %s (%s)", self._user_id, username)

    def get_id(self) -> str:
        return self._user_id

    def get_username(self) -> str:
        return self._username

    def add_playlist(self, playlist: Playlist) -> None:
        """Store an independent copy of the playlist"""
        self._playlists.append(copy.copy(playlist))
        self._playlist_count += 1
        logger.debug("Attached playlist %s to user %s",
                     playlist.get_id(), self._user_id)

    def get_playlists(self) -> List[Playlist]:
        return self._playlists.copy()

    def get_playlist_count(self) -> int:
        return self._playlist_count

    def render(self) -> str:
        """Report of this user and their playlists"""
        parts = [
            f"User ID: {self._user_id}\n",
            f"Username: {self._username}\n",
            f"Password: {self._hashed_password}\n",
            f"PlaylistCount: {self._playlist_count}\n",
            "Playlists:\n",
        ]
        parts.extend(playlist.render() for playlist in self._playlists)
        parts.append("\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"User(id={self._user_id}, username={self._username})"


# ==================== Demo ====================

def main():
    logging.basicConfig(level=LOG_LEVEL)

    qubicon = User("Qubicon")
    travis = User("Travis Scott")

    wave_tracks = Playlist("Wave Tracks", "Go with the wave!")
    sample = Track("Sample Track", qubicon, 210)
    print(f"{sample.get_title()} {sample.get_track_owner()}")

    print(SEPARATOR)

    one_of_us = Track("One of Us", travis, 157)
    one_of_us.set_visibility(Visibility.PRIVATE)

    print(qubicon, end="")
    print(SEPARATOR)
    print(wave_tracks, end="")
    print(SEPARATOR)

    wave_tracks.add_track(sample)
    wave_tracks.add_track(one_of_us)

    qubicon.add_playlist(wave_tracks)

    print(qubicon, end="")
    print(SEPARATOR)


if __name__ == "__main__":
    main()


# Design Notes:

# Tracks point back at their owner through weakref, so a missing user is a
# ReferenceError rather than a stale object.
# A playlist owns its tracks; create_track builds them in place.
# Users copy playlists on insertion and a playlist copy copies its tracks,
# so every relationship follows the same value semantics.
