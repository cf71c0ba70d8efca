import json

import httpx

from writer.schemas.blog import CommitResult, ImageAsset, PublishOutcome


class FakeImagePublisher:
    """
    Image publisher stand-in that records every publish() call.
    """

    def __init__(self, result: ImageAsset | None = None):
        self.result = result or ImageAsset(
            success=True,
            url="https://res.cloudinary.com/demo/image/upload/blog.jpg",
            asset_id="portfolio-blog-images/blog",
        )
        self.calls = []

    def publish(self, image_data, folder, asset_id, content_type=None):
        self.calls.append(
            {
                "image_data": image_data,
                "folder": folder,
                "asset_id": asset_id,
                "content_type": content_type,
            }
        )
        return self.result


class FakeContentWriter:
    """
    Repository writer stand-in that records every write_and_commit() call.
    """

    def __init__(self, result: CommitResult | None = None, error: Exception | None = None):
        self.result = result or CommitResult(success=True)
        self.error = error
        self.calls = []

    def write_and_commit(self, access_token, content, metadata_json, filename, message):
        self.calls.append(
            {
                "access_token": access_token,
                "content": content,
                "metadata": json.loads(metadata_json),
                "filename": filename,
                "message": message,
            }
        )
        if self.error:
            raise self.error
        return self.result


class FakePublishService:
    """
    Minimal publish service stand-in for router tests.
    """

    def __init__(self, outcome: PublishOutcome | None = None):
        self.outcome = outcome or PublishOutcome(success=True, message="ok")
        self.calls = []

    def publish(self, submission, access_token):
        self.calls.append((submission, access_token))
        return self.outcome


class FakeRecommendationsService:
    def __init__(self, outcome: PublishOutcome):
        self.outcome = outcome

    def list_recommendations(self):
        return self.outcome


class FakeGitHubApi:
    """
    In-memory Git Data API for httpx.MockTransport.
    Set fail_on to a (method, path suffix) pair to make that call return 422.
    """

    def __init__(self, fail_on: tuple[str, str] | None = None):
        self.fail_on = fail_on
        self.requests = []
        self.blobs = {}
        self.trees = {}
        self.commits = {}
        self.refs = {"heads/main": "commit-0"}
        self.commits["commit-0"] = {"tree": "tree-0", "parents": []}

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def calls(self):
        return [(method, path) for method, path, _body in self.requests]

    def handle(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.split("/git/", 1)[-1]
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.method, path, body))

        if self.fail_on and request.method == self.fail_on[0] and path.endswith(
            self.fail_on[1]
        ):
            return httpx.Response(422, json={"message": "Update is not a fast forward"})

        if request.method == "GET" and path.startswith("ref/"):
            ref = path.removeprefix("ref/")
            return httpx.Response(200, json={"object": {"sha": self.refs[ref]}})
        if request.method == "GET" and path.startswith("commits/"):
            commit = self.commits[path.removeprefix("commits/")]
            return httpx.Response(200, json={"tree": {"sha": commit["tree"]}})
        if request.method == "POST" and path == "blobs":
            sha = f"blob-{len(self.blobs) + 1}"
            self.blobs[sha] = body
            return httpx.Response(201, json={"sha": sha})
        if request.method == "POST" and path == "trees":
            sha = f"tree-{len(self.trees) + 1}"
            self.trees[sha] = body
            return httpx.Response(201, json={"sha": sha})
        if request.method == "POST" and path == "commits":
            sha = f"commit-{len(self.commits)}"
            self.commits[sha] = body
            return httpx.Response(201, json={"sha": sha})
        if request.method == "PATCH" and path.startswith("refs/"):
            self.refs[path.removeprefix("refs/")] = body["sha"]
            return httpx.Response(200, json={"object": {"sha": body["sha"]}})
        return httpx.Response(404, json={"message": "Not Found"})
