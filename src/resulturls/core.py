import logging
from typing import Any, Optional, Protocol

from .constants import (
    FRIENDLY_STYLE,
    GENERATED_IMAGE_EXTENSION,
    GETFILE_ENDPOINT,
    GETGZIP_ENDPOINT,
    GZIP_EXTENSION,
    RESPONSE_BODY_ENDPOINT,
    RESULTS_ENDPOINT,
    STANDARD_STYLE,
    TEST_ID_DATE_LENGTH,
    TEST_ID_SEPARATOR,
    THUMB_SUFFIX,
    THUMBNAIL_ENDPOINT,
    VIDEO_CREATE_ENDPOINT,
    VIDEO_FRAMES_ENDPOINT,
)
from .errors import InvalidTestId
from .errors_catalog import actionable_error
from .models import RunContext, coerce_bool

logger = logging.getLogger("resulturls")


class UrlStyle(Protocol):
    name: str

    def result_page(self, context: RunContext, page: str, extra_params: Optional[str] = None) -> str:
        ...

    def thumbnail(self, context: RunContext, image: str) -> str:
        ...

    def generated_image(self, context: RunContext, image: str) -> str:
        ...

    def result_summary(self, context: RunContext, extra_params: Optional[str] = None) -> str:
        ...


class FriendlyUrlStyle:
    """Path based URLs served through the server's rewrite rules."""

    name = FRIENDLY_STYLE

    def result_page(self, context: RunContext, page: str, extra_params: Optional[str] = None) -> str:
        url = f"{context.base_url}/result/{context.test_id}/{context.run}/{page}/"
        if context.cached:
            url += "cached/"
        if context.is_multistep:
            url += f"{context.step}/"
        if extra_params:
            url += f"?{extra_params}"
        return url

    def thumbnail(self, context: RunContext, image: str) -> str:
        dot_pos = image.rfind(".")
        if dot_pos == -1:
            thumb_name = image + THUMB_SUFFIX
        else:
            thumb_name = image[:dot_pos] + THUMB_SUFFIX + image[dot_pos:]
        return f"{context.base_url}/result/{context.test_id}/{context.underscore_prefix()}{thumb_name}"

    def generated_image(self, context: RunContext, image: str) -> str:
        test_path = self.results_path(context.test_id)
        return (
            f"{context.base_url}/results/{test_path}/"
            f"{context.underscore_prefix()}{image}{GENERATED_IMAGE_EXTENSION}"
        )

    def result_summary(self, context: RunContext, extra_params: Optional[str] = None) -> str:
        url = f"{context.base_url}/result/{context.test_id}/"
        if extra_params:
            url += f"?{extra_params}"
        return url

    @staticmethod
    def results_path(test_id: str) -> str:
        """Map ``YYMMDD_XXXX[_N]`` to the ``YY/MM/DD/XXXX[/N]`` results directory.

        Segments past the third are not part of the directory layout.
        """
        parts = test_id.split(TEST_ID_SEPARATOR)
        date_part = parts[0]
        if len(parts) < 2 or len(date_part) < TEST_ID_DATE_LENGTH:
            raise InvalidTestId(actionable_error("invalid_test_id", test_id=test_id))

        path = f"{date_part[0:2]}/{date_part[2:4]}/{date_part[4:6]}/{parts[1]}"
        if len(parts) > 2:
            path += f"/{parts[2]}"
        return path


class StandardUrlStyle:
    """Query string URLs addressed straight at the PHP endpoints."""

    name = STANDARD_STYLE

    def result_page(self, context: RunContext, page: str, extra_params: Optional[str] = None) -> str:
        extra = f"&{extra_params}" if coerce_bool(extra_params) else ""
        return f"{context.base_url}/{page}.php?{context.url_params()}{extra}"

    def thumbnail(self, context: RunContext, image: str) -> str:
        return (
            f"{context.base_url}/{THUMBNAIL_ENDPOINT}?{context.url_params()}"
            f"&file={context.underscore_prefix()}{image}"
        )

    def generated_image(self, context: RunContext, image: str) -> str:
        return f"{context.base_url}/{image}.php?{context.url_params()}"

    def result_summary(self, context: RunContext, extra_params: Optional[str] = None) -> str:
        extra = f"&{extra_params}" if coerce_bool(extra_params) else ""
        return f"{context.base_url}/{RESULTS_ENDPOINT}?test={context.test_id}{extra}"


class UrlGenerator:
    """Builds URLs for the resources of a single test run.

    Page, thumbnail, generated image and summary URLs depend on the URL
    style; file, response body and video URLs are the same for both.
    Nothing is escaped: callers pass URL-safe names and parameters.
    """

    def __init__(self, context: RunContext, style: UrlStyle):
        self._context = context
        self._style = style

    @property
    def context(self) -> RunContext:
        return self._context

    @property
    def style_name(self) -> str:
        return self._style.name

    @property
    def friendly(self) -> bool:
        return self._style.name == FRIENDLY_STYLE

    def result_page(self, page: str, extra_params: Optional[str] = None) -> str:
        """URL of a result page such as ``details`` or ``screen_shot``.

        ``extra_params`` is appended as a query string, given without a
        leading ``?`` or ``&``.
        """
        return self._style.result_page(self._context, page, extra_params)

    def thumbnail(self, image: str) -> str:
        return self._style.thumbnail(self._context, image)

    def generated_image(self, image: str) -> str:
        """URL of a server-rendered image such as ``waterfall`` or ``connection``.

        Raises InvalidTestId for friendly URLs when the test id does not
        map to a results directory.
        """
        return self._style.generated_image(self._context, image)

    def result_summary(self, extra_params: Optional[str] = None) -> str:
        return self._style.result_summary(self._context, extra_params)

    def get_file(self, file: str, video: str = "") -> str:
        """URL to fetch a raw result file; ``video`` names the video directory it lives in."""
        ctx = self._context
        video_param = f"&video={video}" if coerce_bool(video) else ""
        return f"{ctx.base_url}/{GETFILE_ENDPOINT}?test={ctx.test_id}{video_param}&file={file}"

    def get_gzip(self, file: str) -> str:
        ctx = self._context
        compressed_param = "&compressed=1" if file.endswith(GZIP_EXTENSION) else ""
        return f"{ctx.base_url}/{GETGZIP_ENDPOINT}?test={ctx.test_id}{compressed_param}&file={file}"

    def response_body_by_request_number(self, request_number: Any) -> str:
        ctx = self._context
        return f"{ctx.base_url}/{RESPONSE_BODY_ENDPOINT}?{ctx.url_params()}&request={request_number}"

    def response_body_by_body_id(self, body_id: Any) -> str:
        ctx = self._context
        return f"{ctx.base_url}/{RESPONSE_BODY_ENDPOINT}?{ctx.url_params()}&bodyid={body_id}"

    def create_video(self) -> str:
        ctx = self._context
        tests = f"{ctx.test_id}-r:{ctx.run}-c:{ctx.cached_flag}"
        video_id = f"{ctx.test_id}.{ctx.run}.{ctx.cached_flag}"
        if ctx.is_multistep:
            tests += f"-s:{ctx.step}"
            video_id += f".{ctx.step}"
        return f"{ctx.base_url}/{VIDEO_CREATE_ENDPOINT}?tests={tests}&id={video_id}"

    def download_video_frames(self) -> str:
        ctx = self._context
        return f"{ctx.base_url}/{VIDEO_FRAMES_ENDPOINT}?{ctx.url_params()}"


def create(friendly_urls: Any, base_url: Any, test_id: Any, run: Any, cached: Any, step: Any = 1) -> UrlGenerator:
    """Build a UrlGenerator for friendly (rewritten) or standard (query string) URLs.

    Inputs are coerced rather than validated: ``run`` and ``step`` are read
    as integers, ``cached`` by truthiness, and ``base_url`` loses any
    trailing slashes.
    """
    context = RunContext.build(base_url, test_id, run, cached, step)
    style: UrlStyle = FriendlyUrlStyle() if coerce_bool(friendly_urls) else StandardUrlStyle()
    logger.debug(
        "Using %s URLs for test %s run %s (cached=%s, step=%s)",
        style.name,
        context.test_id,
        context.run,
        context.cached,
        context.step,
    )
    return UrlGenerator(context, style)
