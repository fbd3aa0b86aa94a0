"""Tests for relevance scoring."""

from blogsearch.domain.document import DocumentKind
from blogsearch.search.scorer import query_words, rank, score


class TestScore:
    """Test field-weighted scoring."""

    def test_exact_tag_and_repeated_title(self, make_doc):
        doc = make_doc(title="Linux Linux", plain_text="linux is fun", tags=["linux"], author="Linus")
        # title 5 + 2*10, body 1 + 2, exact tag 120, course bonus 1
        assert score("linux", doc) == 149

    def test_partial_tag_and_author(self, make_doc):
        doc = make_doc(title="Linux Linux", plain_text="linux is fun", tags=["linux"], author="Linus")
        # title 25, body 3, partial tag 40, partial author 50, bonus 1
        assert score("lin", doc) == 119

    def test_exact_author(self, make_doc):
        doc = make_doc(title="Other", author="Bob")
        assert score("bob", doc) == 101

    def test_case_insensitive(self, make_doc):
        doc = make_doc(title="Docker", plain_text="")
        assert score("DOCKER", doc) == score("docker", doc) == 16

    def test_substring_counts_inside_words(self, make_doc):
        doc = make_doc(title="Intro", plain_text="network internet")
        # "net" occurs twice in the body
        assert score("net", doc) == 1 + 2 * 2 + 1

    def test_multi_word_query_sums_words(self, make_doc):
        doc = make_doc(title="Networking Basics", plain_text="Networking basics: IP addresses")
        assert score("networking basics", doc) == 37

    def test_no_match_keeps_course_bonus(self, make_doc):
        doc = make_doc(title="Linux", plain_text="shell")
        assert score("kubernetes", doc) == 1

    def test_non_course_scores_zero(self, make_doc):
        doc = make_doc(id="res/linux.md", title="Linux", kind=DocumentKind.RESOURCE, url="/res/linux")
        assert score("linux", doc) == 0

    def test_blank_query(self, make_doc):
        assert score("   ", make_doc(title="x")) == 0

    def test_query_words(self):
        assert query_words("  Hello   WORLD ") == ["hello", "world"]


class TestRank:
    """Test ordering of scored documents."""

    def test_descending(self, make_doc):
        low = make_doc(id="blog/a/course.md", title="Other", plain_text="python")
        high = make_doc(id="blog/b/course.md", title="Python")
        none = make_doc(id="blog/c/course.md", title="Rust")

        ranked = rank("python", [low, high, none])
        assert [doc.slug for doc, _ in ranked] == ["b", "a", "c"]
        assert [s for _, s in ranked] == [16, 4, 1]

    def test_filters_zero_scores(self, make_doc):
        course = make_doc(id="blog/a/course.md", title="Rust")
        page = make_doc(id="res/rust.md", title="Rust", kind=DocumentKind.RESOURCE, url="/res/rust")
        ranked = rank("rust", [course, page])
        assert [doc.id for doc, _ in ranked] == ["blog/a/course.md"]

    def test_ties_keep_index_order(self, make_doc):
        first = make_doc(id="blog/x/course.md", title="Go")
        second = make_doc(id="blog/y/course.md", title="Go")
        ranked = rank("go", [first, second])
        assert [doc.slug for doc, _ in ranked] == ["x", "y"]
