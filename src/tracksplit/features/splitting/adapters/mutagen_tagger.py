"""In-process tagger using mutagen's easy tag interfaces.

Where: features/splitting/adapters/mutagen_tagger.py
What: Write artist/album/title/track tags without spawning a child process.
Why: Tag containers other than MP3 (FLAC, Ogg, MP4, WAV, AIFF) that eyeD3 cannot handle.
"""

from __future__ import annotations

from typing import Any, cast, final

import mutagen
from mutagen._vorbis import VCommentDict
from mutagen.easyid3 import EasyID3
from mutagen.easymp4 import EasyMP4Tags
from mutagen.id3 import ID3, TALB, TIT2, TPE1, TPE2, TRCK, Frame

from tracksplit.features.naming import TagRequest
from tracksplit.platform.logging import logger
from tracksplit.shared.errors import TaggingError

_UTF8: int = 3


@final
class MutagenTagger:
    """Tag produced tracks through ``mutagen.File(..., easy=True)``.

    Easy ID3/MP4 tags and Vorbis comments are written by key. WAV, AIFF and
    DSF files carry a raw ID3 block, which gets explicit frames. Any other
    container is rejected with ``TaggingError``.
    """

    @staticmethod
    def build_tags(request: TagRequest, *, paired_track_number: bool) -> dict[str, str]:
        """Return easy-tag keys and values for ``request``.

        ID3 and MP4 store the track number as ``N/M``; Vorbis comments use
        separate ``tracknumber`` and ``tracktotal`` fields.
        """
        tags = {
            "artist": request.artist,
            "albumartist": request.album_artist,
            "album": request.album,
            "title": request.title,
        }
        if paired_track_number:
            tags["tracknumber"] = f"{request.track_number}/{request.track_total}"
        else:
            tags["tracknumber"] = str(request.track_number)
            tags["tracktotal"] = str(request.track_total)
        return tags

    @staticmethod
    def build_id3_frames(request: TagRequest) -> list[Frame]:
        return [
            TPE1(encoding=_UTF8, text=[request.artist]),
            TPE2(encoding=_UTF8, text=[request.album_artist]),
            TALB(encoding=_UTF8, text=[request.album]),
            TIT2(encoding=_UTF8, text=[request.title]),
            TRCK(encoding=_UTF8, text=[f"{request.track_number}/{request.track_total}"]),
        ]

    def tag(self, request: TagRequest) -> None:
        try:
            audio = cast(Any, mutagen.File(request.path, easy=True))
            if audio is None:
                raise TaggingError(f"unsupported audio file: {request.path}")
            if audio.tags is None:
                audio.add_tags()

            tags = audio.tags
            if isinstance(tags, (EasyID3, EasyMP4Tags, VCommentDict)):
                paired = not isinstance(tags, VCommentDict)
                for key, value in self.build_tags(request, paired_track_number=paired).items():
                    tags[key] = value
            elif isinstance(tags, ID3):
                for frame in self.build_id3_frames(request):
                    tags.setall(frame.FrameID, [frame])
            else:
                raise TaggingError(
                    f"unsupported tag container {type(tags).__name__}: {request.path}"
                )
            audio.save()
        except mutagen.MutagenError as e:
            raise TaggingError(str(e)) from e

        logger.debug("Tagged %s with mutagen", request.path)


__all__ = ["MutagenTagger"]
