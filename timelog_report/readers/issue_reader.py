"""Issue reader normalizing already-fetched issue records.

This module converts issue nodes in the shape delivered by the upstream
project-management GraphQL API into validated ``WorkItem`` objects. It
does not talk to the API: paging and transport are the job of the
data-retrieval collaborator, which hands over plain dictionaries or a
JSON export of them.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from pydantic import ValidationError

from timelog_report.models.report import ProjectInfo
from timelog_report.models.work_item import Contributor, Epic, TimeEntry, WorkItem
from timelog_report.utils.logging_utils import log_function_call

logger = logging.getLogger(__name__)

UNKNOWN_USER = {"id": "unknown", "name": "Unknown", "username": "unknown"}


class IssueReader:
    """Reader converting raw issue nodes into ``WorkItem`` objects.

    Expected node format (GraphQL field names):
    - id, iid, title, webUrl, state, timeEstimate
    - labels: {"nodes": [{"title": ...}]}
    - epic: {"id", "iid", "title", "webUrl"} or null
    - timelogs: {"nodes": [{"id", "spentAt", "timeSpent", "summary",
      "user": {"id", "name", "username"}}]}

    Normalization rules:
    - Null timelogs and timelogs with ``timeSpent <= 0`` are dropped
    - A missing timelog user becomes the "unknown" contributor
    - Nodes that fail validation are skipped with a warning

    Example:
        >>> reader = IssueReader()
        >>> items = reader.parse_nodes([{"id": "1", "iid": "7", "title": "Fix"}])
        >>> items[0].iid
        '7'
    """

    def parse_nodes(self, nodes: List[Dict[str, Any]]) -> List[WorkItem]:
        """Parse a list of raw issue nodes.

        Args:
            nodes: Raw issue dictionaries

        Returns:
            List of validated WorkItem objects (invalid nodes skipped)
        """
        items: List[WorkItem] = []
        for index, node in enumerate(nodes):
            item = self._parse_node(node, index)
            if item is not None:
                items.append(item)

        logger.info(f"Parsed {len(items)} of {len(nodes)} issue nodes")
        return items

    @log_function_call
    def read_file(
        self, path: Union[str, Path]
    ) -> Tuple[Optional[ProjectInfo], List[WorkItem]]:
        """Read issue nodes from a JSON export.

        The file may contain a plain list of issue nodes, or the GraphQL
        ``project`` payload (optionally wrapped in ``data``) whose
        ``issues.nodes`` hold the issues.

        Args:
            path: Path to the JSON file

        Returns:
            Tuple of (project info if present, parsed work items)

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is not valid JSON or has an unknown shape
        """
        path = Path(path)
        logger.info(f"Reading issues from {path}")

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

        project, nodes = self._unwrap(payload)
        return project, self.parse_nodes(nodes)

    def _unwrap(self, payload: Any) -> Tuple[Optional[ProjectInfo], List[Dict[str, Any]]]:
        if isinstance(payload, list):
            return None, payload

        if not isinstance(payload, dict):
            raise ValueError("Issue export must be a JSON list or object")

        if isinstance(payload.get("data"), dict):
            payload = payload["data"]

        project_payload = payload.get("project")
        if isinstance(project_payload, dict):
            project = ProjectInfo(
                id=str(project_payload.get("id", "unknown")),
                name=project_payload.get("name") or "unknown",
                web_url=project_payload.get("webUrl") or "",
            )
            issues = project_payload.get("issues") or {}
            return project, list(issues.get("nodes") or [])

        if isinstance(payload.get("issues"), list):
            return None, payload["issues"]

        raise ValueError("Issue export has no 'project.issues.nodes' or 'issues' list")

    def _parse_node(self, node: Dict[str, Any], index: int) -> Optional[WorkItem]:
        """Parse a single issue node, returning None if it is invalid."""
        if not isinstance(node, dict):
            logger.warning(f"Skipping issue node {index}: not an object")
            return None

        try:
            return WorkItem(
                id=str(node.get("id", "")),
                iid=node.get("iid", ""),
                title=node.get("title") or "",
                web_url=node.get("webUrl") or "",
                state=node.get("state") or "",
                labels=self._parse_labels(node.get("labels")),
                epic=self._parse_epic(node.get("epic")),
                time_estimate=node.get("timeEstimate") or None,
                timelogs=self._parse_timelogs(node.get("timelogs")),
            )
        except ValidationError as e:
            logger.warning(f"Skipping issue node {index} ({node.get('id')}): {e}")
            return None

    @staticmethod
    def _parse_labels(labels: Any) -> List[str]:
        if isinstance(labels, dict):
            labels = labels.get("nodes") or []
        titles = []
        for label in labels or []:
            title = label.get("title") if isinstance(label, dict) else label
            if title:
                titles.append(str(title))
        return titles

    @staticmethod
    def _parse_epic(epic: Any) -> Optional[Epic]:
        if not isinstance(epic, dict):
            if epic:
                logger.warning(f"Ignoring epic that is not an object: {epic!r}")
            return None
        return Epic(
            id=str(epic.get("id")),
            iid=epic.get("iid"),
            title=epic.get("title") or "",
            web_url=epic.get("webUrl"),
        )

    @staticmethod
    def _parse_timelogs(timelogs: Any) -> List[TimeEntry]:
        if isinstance(timelogs, dict):
            timelogs = timelogs.get("nodes") or []

        entries: List[TimeEntry] = []
        for log in timelogs or []:
            if not log:
                continue
            if not isinstance(log, dict):
                logger.warning(f"Skipping timelog that is not an object: {log!r}")
                continue

            try:
                seconds = int(log.get("timeSpent", log.get("seconds")) or 0)
            except (TypeError, ValueError):
                seconds = 0
            if seconds <= 0:
                logger.debug(f"Dropping timelog {log.get('id')} with {seconds}s")
                continue

            user = log.get("user")
            if not isinstance(user, dict):
                user = UNKNOWN_USER

            # Non-string timestamps are kept raw and counted as unparsable
            spent_at = log.get("spentAt")
            if spent_at is None:
                spent_at = ""
            elif not isinstance(spent_at, str):
                spent_at = str(spent_at)

            try:
                entries.append(
                    TimeEntry(
                        id=str(log.get("id", "")),
                        spent_at=spent_at,
                        seconds=seconds,
                        summary=log.get("summary"),
                        user=Contributor(
                            id=str(user.get("id") or UNKNOWN_USER["id"]),
                            name=user.get("name") or UNKNOWN_USER["name"],
                            username=user.get("username"),
                        ),
                    )
                )
            except ValidationError as e:
                # Only this entry is lost; the rest of the issue is kept
                logger.warning(f"Skipping timelog {log.get('id')}: {e}")
        return entries
