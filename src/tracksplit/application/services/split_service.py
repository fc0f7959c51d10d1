"""Application service for splitting recordings.

This layer centralizes construction of collaborators from configuration so
that UIs only assemble a ``SplitRequest`` and call ``split``.
"""

from __future__ import annotations

from typing import Callable, final

from tracksplit.config import Config, ConfigError
from tracksplit.features.splitting import (
    CutterPort,
    Eyed3Tagger,
    FfmpegCutter,
    FilesystemPort,
    LocalFilesystemAdapter,
    MutagenTagger,
    SplitRequest,
    SplitRunner,
    TaggerKind,
    TaggerPort,
    TrackResult,
)


@final
class SplitService:
    """Application service that wires collaborators and runs a split.

    Tests can inject light-weight doubles through the factories while
    production code relies on ffmpeg, eyeD3/mutagen and the local disk.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        tagger_kind: TaggerKind | None = None,
        cutter_factory: Callable[[Config], CutterPort] | None = None,
        tagger_factory: Callable[[Config, TaggerKind], TaggerPort] | None = None,
        filesystem_factory: Callable[[], FilesystemPort] | None = None,
    ) -> None:
        self.config: Config = config or Config()
        self.tagger_kind: TaggerKind = tagger_kind or self._configured_tagger(self.config)
        self._cutter_factory: Callable[[Config], CutterPort] = (
            cutter_factory or self._default_cutter
        )
        self._tagger_factory: Callable[[Config, TaggerKind], TaggerPort] = (
            tagger_factory or self._default_tagger
        )
        self._filesystem_factory: Callable[[], FilesystemPort] = (
            filesystem_factory or LocalFilesystemAdapter
        )

    @staticmethod
    def _configured_tagger(config: Config) -> TaggerKind:
        try:
            return TaggerKind.from_user_input(config.tagger)
        except ValueError as e:
            raise ConfigError(str(e)) from e

    @staticmethod
    def _default_cutter(config: Config) -> CutterPort:
        return FfmpegCutter(config.ffmpeg_binary)

    @staticmethod
    def _default_tagger(config: Config, kind: TaggerKind) -> TaggerPort:
        if kind is TaggerKind.MUTAGEN:
            return MutagenTagger()
        return Eyed3Tagger(config.eyed3_binary)

    def build_runner(self) -> SplitRunner:
        """Build a ``SplitRunner`` with collaborators chosen by configuration."""

        return SplitRunner(
            cutter=self._cutter_factory(self.config),
            tagger=self._tagger_factory(self.config, self.tagger_kind),
            filesystem=self._filesystem_factory(),
        )

    def split(self, request: SplitRequest) -> list[TrackResult]:
        """Run (or plan, for dry runs) the split described by ``request``."""

        return self.build_runner().run(request)


__all__ = ["SplitService"]
