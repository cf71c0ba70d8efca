import base64
import logging
from typing import Any, Dict, List, Optional

import httpx

from writer.errors import InputValidationError, RemoteServiceError
from writer.schemas.blog import CommitResult
from writer.settings import Settings, settings

logger = logging.getLogger(__name__)

REGULAR_FILE_MODE = "100644"


class GitHubContentWriter:
    """
    Commits a post's markdown and metadata files to the blog repository
    through the Git Data API: ref -> commit -> blobs -> tree -> commit -> ref.

    Objects created before a failing step are left in place unreferenced.
    """

    def __init__(
        self,
        settings_obj: Settings = settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings_obj
        self.transport = transport

    @property
    def repo_path(self) -> str:
        return f"/repos/{self.settings.github_owner}/{self.settings.github_repo_name}"

    def content_paths(self, filename: str) -> tuple[str, str]:
        base = f"{self.settings.CONTENT_DIR.rstrip('/')}/{filename}"
        return f"{base}.md", f"{base}.json"

    def write_and_commit(
        self,
        access_token: Optional[str],
        content: Optional[str],
        metadata_json: Optional[str],
        filename: str,
        message: Optional[str],
    ) -> CommitResult:
        try:
            if not (access_token and content and message and metadata_json):
                raise InputValidationError("Missing required fields")

            with self._client(access_token) as client:
                commit_sha = self._commit_files(
                    client, content, metadata_json, filename, message
                )

            logger.info(
                f"Committed {filename} to {self.settings.GITHUB_REPO}@"
                f"{self.settings.GITHUB_BRANCH} ({commit_sha})"
            )
            return CommitResult(success=True)
        except InputValidationError as e:
            logger.warning(f"Refusing to commit {filename}: {e}")
            return CommitResult(success=False, error=str(e))
        except Exception as e:
            logger.error(f"Failed to commit {filename} to GitHub: {e}")
            return CommitResult(success=False, error=str(e))

    def _commit_files(
        self,
        client: httpx.Client,
        content: str,
        metadata_json: str,
        filename: str,
        message: str,
    ) -> str:
        branch_ref = f"heads/{self.settings.GITHUB_BRANCH}"

        # Resolve the branch tip and the tree it points at
        ref = self._request(client, "GET", f"/git/ref/{branch_ref}")
        parent_sha = ref["object"]["sha"]
        parent = self._request(client, "GET", f"/git/commits/{parent_sha}")
        base_tree_sha = parent["tree"]["sha"]

        content_path, json_path = self.content_paths(filename)
        content_blob = self._create_blob(client, content)
        json_blob = self._create_blob(client, metadata_json)

        tree = self._request(
            client,
            "POST",
            "/git/trees",
            json={
                "base_tree": base_tree_sha,
                "tree": tree_entries(
                    {content_path: content_blob, json_path: json_blob}
                ),
            },
        )

        commit = self._request(
            client,
            "POST",
            "/git/commits",
            json={"message": message, "tree": tree["sha"], "parents": [parent_sha]},
        )

        # Fast-forward only; GitHub rejects the update if the branch moved
        self._request(
            client, "PATCH", f"/git/refs/{branch_ref}", json={"sha": commit["sha"]}
        )
        return commit["sha"]

    def _create_blob(self, client: httpx.Client, text: str) -> str:
        blob = self._request(
            client,
            "POST",
            "/git/blobs",
            json={
                "content": base64.b64encode(text.encode("utf-8")).decode("ascii"),
                "encoding": "base64",
            },
        )
        return blob["sha"]

    def _client(self, access_token: str) -> httpx.Client:
        return httpx.Client(
            base_url=self.settings.GITHUB_API_URL,
            headers={
                "Authorization": f"Bearer {access_token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            transport=self.transport,
        )

    def _request(
        self,
        client: httpx.Client,
        method: str,
        path: str,
        json: Dict[str, Any] | None = None,
    ) -> Dict[str, Any]:
        url = f"{self.repo_path}{path}"
        try:
            response = client.request(method, url, json=json)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise RemoteServiceError(
                "github",
                f"{method} {url} failed with status {e.response.status_code}",
                e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            raise RemoteServiceError("github", f"{method} {url} failed: {e}") from e
        return response.json()


def tree_entries(blobs: Dict[str, str]) -> List[Dict[str, str]]:
    return [
        {"path": path, "mode": REGULAR_FILE_MODE, "type": "blob", "sha": sha}
        for path, sha in blobs.items()
    ]
