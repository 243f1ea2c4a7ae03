# ===========================================================================
# File: registro/crud/crud_registro.py
# ===========================================================================
import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from registro.core.config import logger
from registro.core.errors import StorageFault
from registro.models.registro import RegistroEstudiante


class CRUDRegistro:
    """Flat-file store holding the whole collection as one JSON array.

    Every call goes back to the file; nothing is cached between requests.
    Writes land in a sibling temp file which is then renamed over the target,
    so a reader sees either the old document or the new one, never half of it.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._write_lock = threading.RLock()

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        with self._write_lock:
            # re-check under the lock
            if not self.path.exists():
                logger.info(f"Creating empty record file at {self.path}")
                self.save([])

    def load(self) -> List[Dict[str, Any]]:
        try:
            self._ensure_file()
            raw = self.path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read record file {self.path}: {e}", exc_info=True)
            raise StorageFault("No se pudo leer el registro") from e

        try:
            parsed = json.loads(raw.decode("utf-8"))
        except ValueError:
            logger.warning(f"Record file {self.path} is not valid JSON, treating it as empty.")
            return []
        if not isinstance(parsed, list):
            logger.warning(f"Record file {self.path} does not hold a JSON array, treating it as empty.")
            return []
        return parsed

    def save(self, records: Sequence[Dict[str, Any]]) -> None:
        payload = json.dumps(list(records), indent=2, ensure_ascii=False) + "\n"
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Could not write record file {self.path}: {e}", exc_info=True)
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageFault("No se pudo guardar el registro") from e

    def append(self, registro: RegistroEstudiante) -> int:
        """Add one record and return the new collection size."""
        # load-then-save must not interleave between writers
        with self._write_lock:
            try:
                records = self.load()
            except StorageFault as e:
                raise StorageFault("No se pudo guardar el registro") from e
            records.append(registro.to_document())
            self.save(records)
            return len(records)
