"""URLRewriter bindings against a mongomock database (no mocks)."""

from collections import namedtuple

import pytest

from tests.unit.conftest import database_config
from urlmapper.api.mapping.MappingStore import MappingStore
from urlmapper.api.meta.MetaStore import MetaStore
from urlmapper.api.options.Options import Options
from urlmapper.api.rewrite.URLRewriter import URLRewriter

pytestmark = pytest.mark.rewrite

LOCAL = "https://site.example/wp-content/uploads/audio/a.mp3"
REMOTE = "https://cdn.example/audio/a.mp3"

ImageSrc = namedtuple("ImageSrc", ["url", "width", "height", "is_intermediate"])


@pytest.fixture
def rewriter(site) -> URLRewriter:
    db = database_config()
    store = MappingStore(Options(db))
    store.save([{"local_prefix": "/wp-content/uploads/audio/", "remote_base": "https://cdn.example/audio/"}])
    return URLRewriter(store=store, site=site, meta_store=MetaStore(db))


class TestRewriteString:
    def test_rewrites_content(self, rewriter):
        assert rewriter.rewrite_string(f'<a href="{LOCAL}">a</a>') == f'<a href="{REMOTE}">a</a>'

    def test_non_string_passthrough(self, rewriter):
        assert rewriter.rewrite_string(None) is None
        assert rewriter.rewrite_string(42) == 42
        assert rewriter.rewrite_string("") == ""

    def test_rewrite_url(self, rewriter):
        assert rewriter.rewrite_url(LOCAL) == REMOTE

    def test_saved_mappings_apply_immediately(self, rewriter):
        images = "/wp-content/uploads/images/a.png"
        assert rewriter.rewrite_string(images) == images
        rewriter.store.save(
            [
                *rewriter.store.load().mappings_as_dicts(),
                {"local_prefix": "/wp-content/uploads/images/", "remote_base": "https://cdn.example/images/"},
            ]
        )
        assert rewriter.rewrite_string(images) == "https://cdn.example/images/a.png"

    def test_no_mappings_is_noop(self, site):
        rewriter = URLRewriter(store=MappingStore(Options(database_config())), site=site)
        assert rewriter.replacement_pairs() == []
        assert rewriter.rewrite_string(LOCAL) == LOCAL


class TestRewriteImageSrc:
    def test_list_only_first_element_changes(self, rewriter):
        assert rewriter.rewrite_image_src([LOCAL, 640, 480, False], 7, "medium", False) == [REMOTE, 640, 480, False]

    def test_tuple_kept(self, rewriter):
        assert rewriter.rewrite_image_src((LOCAL, 640, 480, True)) == (REMOTE, 640, 480, True)

    def test_namedtuple_kept(self, rewriter):
        result = rewriter.rewrite_image_src(ImageSrc(LOCAL, 640, 480, True))
        assert isinstance(result, ImageSrc)
        assert result.url == REMOTE

    @pytest.mark.parametrize("image", [False, None, [], [None, 1, 2, False], "not-a-descriptor"])
    def test_other_values_passthrough(self, rewriter, image):
        assert rewriter.rewrite_image_src(image) == image


class TestRewriteSrcset:
    def test_urls_rewritten_other_fields_kept(self, rewriter):
        sources = {
            300: {"url": LOCAL, "descriptor": "w", "value": 300},
            600: {"url": "https://elsewhere.example/b.png", "descriptor": "w", "value": 600},
        }
        result = rewriter.rewrite_srcset(sources, (300, 200), "a.png", {}, 9)
        assert result[300] == {"url": REMOTE, "descriptor": "w", "value": 300}
        assert result[600] == sources[600]
        assert sources[300]["url"] == LOCAL

    def test_non_dict_passthrough(self, rewriter):
        assert rewriter.rewrite_srcset(False) is False

    def test_candidates_without_url_kept(self, rewriter):
        assert rewriter.rewrite_srcset({300: "odd"}) == {300: "odd"}


class TestMetaValues:
    def test_whitelist(self, rewriter):
        assert rewriter.is_meta_key_allowed("word_audio_file")
        assert rewriter.is_meta_key_allowed("Word_Audio_File")
        assert not rewriter.is_meta_key_allowed("title")

    def test_not_whitelisted_passthrough(self, rewriter):
        assert rewriter.rewrite_meta_value("title", 1, LOCAL, True) == LOCAL
        assert rewriter.rewrite_meta_value("title", 1, None, True) is None

    def test_invalid_key_passthrough(self, rewriter):
        assert rewriter.rewrite_meta_value(None, 1, LOCAL, True) == LOCAL
        assert rewriter.rewrite_meta_value("", 1, LOCAL, True) == LOCAL

    def test_current_value_rewritten(self, rewriter):
        value = {"files": [LOCAL]}
        assert rewriter.rewrite_meta_value("audio_file_path", 1, value, True) == {"files": [REMOTE]}

    def test_single_reads_latest_row(self, rewriter):
        rewriter.meta_store.add(1, "word_audio_file", "/wp-content/uploads/audio/old.mp3")
        rewriter.meta_store.add(1, "word_audio_file", "/wp-content/uploads/audio/new.mp3")
        assert rewriter.rewrite_meta_value("word_audio_file", 1, None, True) == "https://cdn.example/audio/new.mp3"

    def test_multi_reads_all_rows_in_order(self, rewriter):
        rewriter.meta_store.add(1, "word_audio_file", "/wp-content/uploads/audio/1.mp3")
        rewriter.meta_store.add(1, "word_audio_file", ["/wp-content/uploads/audio/2.mp3"])
        assert rewriter.rewrite_meta_value("word_audio_file", 1, None, False) == [
            "https://cdn.example/audio/1.mp3",
            ["https://cdn.example/audio/2.mp3"],
        ]

    def test_absent_is_none_not_empty(self, rewriter):
        assert rewriter.rewrite_meta_value("word_audio_file", 1, None, True) is None
        assert rewriter.rewrite_meta_value("word_audio_file", 1, None, False) is None

    def test_stored_empty_string_is_kept(self, rewriter):
        rewriter.meta_store.add(2, "word_audio_file", "")
        assert rewriter.rewrite_meta_value("word_audio_file", 2, None, True) == ""

    def test_without_meta_store_keeps_none(self, rewriter):
        rewriter.meta_store = None
        assert rewriter.rewrite_meta_value("word_audio_file", 1, None, True) is None

    def test_filter_argument_order(self, rewriter):
        assert rewriter.filter_object_metadata(LOCAL, 1, "word_audio_file", True) == REMOTE

    def test_max_depth_applies(self, rewriter):
        rewriter.max_depth = 0
        assert rewriter.rewrite_meta_value("word_audio_file", 1, [LOCAL], True) == [LOCAL]
