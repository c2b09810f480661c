import os
from pmf.ifilter import IFilter
from pmf.errors import ImageIOError
from pmf.premaster.utilities import split_premaster_path, premaster_paths, output_paths

import logging
logger = logging.getLogger(__name__)


class PremasterFilter(IFilter):
    """
    Resolves a premaster archive from any of its names.

    The archive is a payload file <base>.pmf and its track descriptor
    <base>.pmf.ff; the converted image is written next to them as
    <base>.bin and <base>.cue.
    """

    def __init__(self, path: str):
        self._base = split_premaster_path(path)
        self.payload_path, self.descriptor_path = premaster_paths(self._base)
        self.bin_path, self.cue_path = output_paths(self._base)
        super().__init__(self.payload_path)

    @property
    def name(self) -> str:
        return "Premaster"

    @property
    def base_path(self) -> str:
        return self._base

    def identify(self) -> bool:
        for path in (self.payload_path, self.descriptor_path):
            if not os.path.isfile(path):
                logger.debug(f"File does not exist: {path}")
                return False
        return True

    def read_payload(self) -> bytes:
        try:
            return self.get_data_fork_stream().read()
        except OSError as e:
            raise ImageIOError(f"Failed to read {self.payload_path}: {e}", self.payload_path) from e
        finally:
            self.close()
