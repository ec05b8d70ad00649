"""
Self-Logger

Each node logs to itself (not to an external logging system).

Design:
- Without a base directory, entries stay in memory on the node
  (bounded, oldest entries dropped first)
- With a base directory, entries go to TSV files
  (human-readable, grep-able): logs/{object_id}/log.tsv
- Append-only (immutable history)
- Log rotation when the TSV file exceeds the size limit
- Entries below the minimum level are discarded
- Query logs with filters (level, custom fields)
"""

import csv
from collections import deque
from pathlib import Path
from datetime import datetime
from typing import Optional, List, Dict, Any, Union


LEVELS = {
    'DEBUG': 10,
    'INFO': 20,
    'WARNING': 30,
    'ERROR': 40,
    'CRITICAL': 50,
}

DEFAULT_MAX_LOG_SIZE = 10 * 1024 * 1024  # 10MB
DEFAULT_MAX_ENTRIES = 1000


class SelfLogger:
    """
    Self-logging for nodes.

    File-backed loggers write to:
    {base_dir}/logs/{object_id}/log.tsv

    Memory-backed loggers keep the last max_entries entries.
    """

    def __init__(
        self,
        object_id: str,
        base_dir: Optional[Union[Path, str]] = None,
        max_log_size: Optional[int] = None,
        max_entries: Optional[int] = None,
        min_level: str = 'DEBUG',
    ):
        """
        Initialize self-logger.

        Args:
            object_id: ID of the node (e.g., 'proto-1')
            base_dir: Base directory for log storage, None keeps logs in memory
            max_log_size: Maximum log file size in bytes before rotation
                         (default: 10MB)
            max_entries: Maximum number of in-memory entries (default: 1000)
            min_level: Entries below this level are discarded
        """
        if min_level not in LEVELS:
            raise ValueError(f"Unknown log level: {min_level}")

        self.object_id = object_id
        self.max_log_size = max_log_size or DEFAULT_MAX_LOG_SIZE
        self.min_level = min_level

        if base_dir is None:
            self.base_dir = None
            self.log_dir = None
            self.log_file = None
            self._entries = deque(maxlen=max_entries or DEFAULT_MAX_ENTRIES)
        else:
            self.base_dir = Path(base_dir)
            self._entries = None

            # Create log directory
            self.log_dir = self.base_dir / 'logs' / object_id
            self.log_dir.mkdir(parents=True, exist_ok=True)

            # Current log file
            self.log_file = self.log_dir / 'log.tsv'

    @property
    def in_memory(self) -> bool:
        return self.log_file is None

    def is_enabled_for(self, level: str) -> bool:
        return LEVELS.get(level, 0) >= LEVELS[self.min_level]

    def log(
        self,
        level: str,
        message: str,
        **kwargs,
    ) -> None:
        """
        Log an entry.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            message: Log message
            **kwargs: Additional fields to log (name, prototype_id, etc.)
        """
        if not self.is_enabled_for(level):
            return

        # Prepare entry
        entry = {
            'timestamp': datetime.now().isoformat(),
            'level': level,
            'message': message,
            **kwargs,
        }

        # Remove None values (don't log empty fields)
        entry = {k: v for k, v in entry.items() if v is not None}

        if self.in_memory:
            # Stringify like a TSV round trip would, so queries behave the same
            self._entries.append({k: str(v) for k, v in entry.items()})
            return

        self._write_entry(entry)

    def debug(self, message: str, **kwargs) -> None:
        """Log DEBUG level message"""
        self.log('DEBUG', message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log INFO level message"""
        self.log('INFO', message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log WARNING level message"""
        self.log('WARNING', message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log ERROR level message"""
        self.log('ERROR', message, **kwargs)

    def critical(self, message: str, **kwargs) -> None:
        """Log CRITICAL level message"""
        self.log('CRITICAL', message, **kwargs)

    def get_logs(
        self,
        level: Optional[Union[str, List[str]]] = None,
        limit: Optional[int] = None,
        offset: int = 0,
        **filters,
    ) -> List[Dict[str, Any]]:
        """
        Get log entries, oldest first.

        Args:
            level: Filter by level (string or list of strings)
            limit: Maximum number of entries to return
            offset: Number of entries to skip
            **filters: Additional filters (e.g., name='say_hi')

        Returns:
            List of log entries (dictionaries with string values)
        """
        if self.in_memory:
            entries = list(self._entries)
        else:
            entries = self._read_entries()

        # Filter by level
        if level is not None:
            if isinstance(level, str):
                level = [level]
            entries = [e for e in entries if e.get('level') in level]

        # Filter by custom fields
        for key, value in filters.items():
            entries = [e for e in entries if e.get(key) == str(value)]

        # Apply offset and limit
        if offset > 0:
            entries = entries[offset:]

        if limit is not None:
            entries = entries[:limit]

        return entries

    def _write_entry(self, entry: Dict[str, Any]) -> None:
        # Check if rotation needed
        self._rotate_if_needed()

        # Get all possible fieldnames (existing + new)
        fieldnames = self._get_fieldnames()
        new_fields = [key for key in entry.keys() if key not in fieldnames]

        is_new_file = not self.log_file.exists()

        if new_fields and not is_new_file:
            # Header grows: rewrite the file with the wider field set
            fieldnames.extend(new_fields)
            rows = self._read_file(self.log_file)
            with open(self.log_file, 'w', newline='') as f:
                writer = csv.DictWriter(f, fieldnames=fieldnames, delimiter='\t')
                writer.writeheader()
                writer.writerows(rows)
        else:
            fieldnames.extend(new_fields)

        with open(self.log_file, 'a', newline='') as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames, delimiter='\t')

            if is_new_file:
                writer.writeheader()

            writer.writerow(entry)

    def _read_entries(self) -> List[Dict[str, Any]]:
        entries = []

        # Rotated files hold older entries
        for rotated_file in sorted(self.log_dir.glob('log-*.tsv')):
            entries.extend(self._read_file(rotated_file))

        if self.log_file.exists():
            entries.extend(self._read_file(self.log_file))

        return entries

    @staticmethod
    def _read_file(path: Path) -> List[Dict[str, Any]]:
        with open(path, 'r', newline='') as f:
            reader = csv.DictReader(f, delimiter='\t')
            # Drop empty cells from rows written before a field existed
            return [{k: v for k, v in row.items() if v != ''} for row in reader]

    def _get_fieldnames(self) -> List[str]:
        """Get existing fieldnames from log file"""
        if not self.log_file.exists():
            return ['timestamp', 'level', 'message']

        with open(self.log_file, 'r', newline='') as f:
            reader = csv.DictReader(f, delimiter='\t')
            return list(reader.fieldnames or ['timestamp', 'level', 'message'])

    def _rotate_if_needed(self) -> None:
        """Rotate log file if it exceeds max size"""
        if not self.log_file.exists():
            return

        # Check size
        size = self.log_file.stat().st_size
        if size < self.max_log_size:
            return

        # Rotate: rename current log to log-TIMESTAMP.tsv
        timestamp = datetime.now().strftime('%Y%m%d-%H%M%S-%f')
        sequence = len(list(self.log_dir.glob('log-*.tsv'))) + 1
        rotated_name = self.log_dir / f'log-{timestamp}-{sequence:04d}.tsv'

        self.log_file.rename(rotated_name)

        # Next log() call will create new log.tsv with header
