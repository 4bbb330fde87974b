import pytest

from resulturls.core import FriendlyUrlStyle, StandardUrlStyle, UrlGenerator, create
from resulturls.errors import InvalidTestId, UrlGeneratorError

TEST_ID = "210101_AB1234_1"


@pytest.fixture
def standard():
    return create(False, "http://x", TEST_ID, 2, True)


@pytest.fixture
def friendly():
    return create(True, "http://x", TEST_ID, 2, True)


def test_create_selects_style_from_flag(standard, friendly):
    assert isinstance(standard, UrlGenerator)
    assert standard.friendly is False
    assert standard.style_name == "standard"
    assert friendly.friendly is True
    assert friendly.style_name == "friendly"


def test_create_strips_trailing_slashes_and_coerces_inputs():
    generator = create("1", "http://x//", TEST_ID, "3", "0", "2")

    assert generator.friendly is True
    assert generator.context.base_url == "http://x"
    assert generator.context.run == 3
    assert generator.context.cached is False
    assert generator.context.step == 2


def test_standard_result_page(standard):
    assert standard.result_page("result") == "http://x/result.php?test=210101_AB1234_1&run=2&cached=1"
    assert standard.result_page("details", "a=b") == (
        "http://x/details.php?test=210101_AB1234_1&run=2&cached=1&a=b"
    )


def test_standard_result_page_includes_step_parameter():
    generator = create(False, "http://x", TEST_ID, 1, False, 3)

    assert generator.result_page("details") == "http://x/details.php?test=210101_AB1234_1&run=1&step=3"


def test_standard_thumbnail_and_generated_image(standard):
    assert standard.thumbnail("screen.jpg") == (
        "http://x/thumbnail.php?test=210101_AB1234_1&run=2&cached=1&file=2_Cached_screen.jpg"
    )
    assert standard.generated_image("waterfall") == (
        "http://x/waterfall.php?test=210101_AB1234_1&run=2&cached=1"
    )


def test_standard_result_summary(standard):
    assert standard.result_summary() == "http://x/results.php?test=210101_AB1234_1"
    assert standard.result_summary("f=json") == "http://x/results.php?test=210101_AB1234_1&f=json"


def test_standard_generated_image_accepts_unstructured_test_id():
    generator = create(False, "http://x", "abc", 1, False)

    assert generator.generated_image("waterfall") == "http://x/waterfall.php?test=abc&run=1"


def test_friendly_result_page(friendly):
    assert friendly.result_page("result") == "http://x/result/210101_AB1234_1/2/result/cached/"


def test_friendly_result_page_with_step_and_extra_params():
    generator = create(True, "http://x", TEST_ID, 2, True, 3)

    assert generator.result_page("details", "a=b") == (
        "http://x/result/210101_AB1234_1/2/details/cached/3/?a=b"
    )


def test_friendly_result_page_ignores_empty_extra_params():
    generator = create(True, "http://x", TEST_ID, 1, False)

    assert generator.result_page("details", "") == "http://x/result/210101_AB1234_1/1/details/"


@pytest.mark.parametrize(
    "image, expected_name",
    [
        ("shot.png", "shot_thumb.png"),
        ("shot", "shot_thumb"),
        ("screen.shot.jpg", "screen.shot_thumb.jpg"),
    ],
)
def test_friendly_thumbnail_inserts_suffix_before_last_extension(friendly, image, expected_name):
    assert friendly.thumbnail(image) == f"http://x/result/210101_AB1234_1/2_Cached_{expected_name}"


def test_friendly_generated_image(friendly):
    assert friendly.generated_image("waterfall") == (
        "http://x/results/21/01/01/AB1234/1/2_Cached_waterfall.png"
    )


def test_friendly_generated_image_with_step_prefix():
    generator = create(True, "http://x", "210101_AB1234", 1, False, 2)

    assert generator.generated_image("connection") == "http://x/results/21/01/01/AB1234/1_2_connection.png"


def test_friendly_results_path_keeps_only_third_segment():
    assert FriendlyUrlStyle.results_path("210101_AB_1_extra") == "21/01/01/AB/1"


@pytest.mark.parametrize("test_id", ["210101", "12345_AB1234", ""])
def test_friendly_generated_image_rejects_malformed_test_id(test_id):
    generator = create(True, "http://x", test_id, 1, False)

    with pytest.raises(InvalidTestId, match="cannot be mapped"):
        generator.generated_image("waterfall")


def test_invalid_test_id_is_a_url_generator_error():
    assert issubclass(InvalidTestId, UrlGeneratorError)


def test_friendly_result_summary(friendly):
    assert friendly.result_summary() == "http://x/result/210101_AB1234_1/"
    assert friendly.result_summary("f=json") == "http://x/result/210101_AB1234_1/?f=json"


@pytest.mark.parametrize("friendly_urls", [True, False])
def test_get_file_adds_video_only_when_given(friendly_urls):
    generator = create(friendly_urls, "http://x", TEST_ID, 2, True)

    assert generator.get_file("log.txt") == "http://x/getfile.php?test=210101_AB1234_1&file=log.txt"
    assert generator.get_file("frame.jpg", "v1") == (
        "http://x/getfile.php?test=210101_AB1234_1&video=v1&file=frame.jpg"
    )


def test_get_gzip_flags_compressed_files(standard):
    assert standard.get_gzip("a.gz") == "http://x/getgzip.php?test=210101_AB1234_1&compressed=1&file=a.gz"
    assert standard.get_gzip("a.txt") == "http://x/getgzip.php?test=210101_AB1234_1&file=a.txt"


def test_response_body_urls(friendly):
    assert friendly.response_body_by_request_number(5) == (
        "http://x/response_body.php?test=210101_AB1234_1&run=2&cached=1&request=5"
    )
    assert friendly.response_body_by_body_id("17") == (
        "http://x/response_body.php?test=210101_AB1234_1&run=2&cached=1&bodyid=17"
    )


def test_create_video_without_step(standard):
    assert standard.create_video() == (
        "http://x/video/create.php?tests=210101_AB1234_1-r:2-c:1&id=210101_AB1234_1.2.1"
    )


def test_create_video_with_step():
    generator = create(True, "http://x", TEST_ID, 1, False, 3)

    assert generator.create_video() == (
        "http://x/video/create.php?tests=210101_AB1234_1-r:1-c:0-s:3&id=210101_AB1234_1.1.0.3"
    )


def test_download_video_frames(standard):
    assert standard.download_video_frames() == (
        "http://x/video/downloadFrames.php?test=210101_AB1234_1&run=2&cached=1"
    )


def test_styles_can_be_composed_directly():
    context = create(False, "http://x", TEST_ID, 2, True).context

    friendly = UrlGenerator(context, FriendlyUrlStyle())
    standard = UrlGenerator(context, StandardUrlStyle())

    assert friendly.result_summary() == "http://x/result/210101_AB1234_1/"
    assert standard.result_summary() == "http://x/results.php?test=210101_AB1234_1"


@pytest.mark.parametrize("friendly_urls", [True, False])
def test_generation_is_repeatable(friendly_urls):
    generator = create(friendly_urls, "http://x", TEST_ID, 2, True, 2)

    for build in (
        lambda: generator.result_page("details", "a=b"),
        lambda: generator.thumbnail("screen.jpg"),
        lambda: generator.generated_image("waterfall"),
        lambda: generator.result_summary(),
        generator.create_video,
    ):
        first = build()
        assert build() == first
        assert first.startswith("http://x/")


def test_zero_string_video_and_standard_extra_params_are_omitted():
    standard = create(False, "http://x", TEST_ID, 1, False)
    friendly = create(True, "http://x", TEST_ID, 1, False)

    assert standard.get_file("f", "0") == "http://x/getfile.php?test=210101_AB1234_1&file=f"
    assert standard.result_page("p", "0") == "http://x/p.php?test=210101_AB1234_1&run=1"
    assert standard.result_summary("0") == "http://x/results.php?test=210101_AB1234_1"
    assert friendly.result_page("p", "0") == "http://x/result/210101_AB1234_1/1/p/?0"
