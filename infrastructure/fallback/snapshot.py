import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from domain.exceptions.rates import FallbackError

logger = logging.getLogger(__name__)


class SnapshotLoader:
	"""Reads the pre-captured rates payload used when the upstream is unreachable."""

	def __init__(self, path: str | Path):
		self.path = Path(path)

	async def load(self) -> Any:
		logger.info(f'Loading fallback data from {self.path.resolve()}')
		try:
			content = await asyncio.to_thread(self.path.read_text, encoding='utf-8')
		except (OSError, UnicodeDecodeError) as e:
			raise FallbackError(f'Cannot read fallback file {self.path}: {e}') from e

		try:
			return json.loads(content)
		except json.JSONDecodeError as e:
			raise FallbackError(f'Invalid JSON in fallback file {self.path}: {e}') from e
