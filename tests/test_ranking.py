"""Unit tests for lexical project reranking."""

from takos_docs.ranking import rerank_projects, score_project


class TestScoreProject:
    def test_exact_title_match_beats_partial(self, make_project) -> None:
        exact = make_project("vercel/next.js", title="Next.js")
        partial = make_project("acme/nextjs-starter", title="Next.js Starter")
        assert score_project(exact, "nextjs") > score_project(partial, "nextjs")

    def test_partial_beats_description_only(self, make_project) -> None:
        partial = make_project("acme/react-router", title="React Router")
        described = make_project("acme/ui", title="UI Kit", description="Built on react")
        assert score_project(partial, "react") > score_project(described, "react")

    def test_title_substring_beats_id_and_description(self, make_project) -> None:
        in_title = make_project("acme/kit", title="supernextjskit")
        elsewhere = make_project("nextjs/site", title="Site", description="Docs for nextjs")
        assert score_project(in_title, "nextjs") > score_project(elsewhere, "nextjs")

    def test_no_overlap_scores_zero(self, make_project) -> None:
        p = make_project("mongodb/docs", title="MongoDB", description="Document database")
        assert score_project(p, "tailwind") == 0.0

    def test_query_without_alphanumerics_scores_zero(self, make_project) -> None:
        p = make_project("mongodb/docs", title="MongoDB")
        assert score_project(p, "") == 0.0
        assert score_project(p, "  --  ") == 0.0

    def test_word_overlap_contributes(self, make_project) -> None:
        p = make_project("acme/ui", title="UI Kit", description="Components for react apps")
        assert score_project(p, "react components") > score_project(p, "vue widgets")


class TestRerankProjects:
    def test_best_match_first(self, make_project) -> None:
        projects = [
            make_project("mongodb/docs", title="MongoDB"),
            make_project("facebook/react", title="React"),
            make_project("vercel/next.js", title="Next.js"),
        ]
        ranked = rerank_projects(projects, "nextjs")
        assert ranked[0].id == "vercel/next.js"

    def test_ties_preserve_input_order(self, make_project) -> None:
        projects = [make_project(f"org/lib{i}", title=f"Lib {i}") for i in range(5)]
        ranked = rerank_projects(projects, "unrelated")
        assert ranked == projects

    def test_stable_among_equal_matches(self, make_project) -> None:
        projects = [
            make_project("a/other", title="Other"),
            make_project("b/react", title="React"),
            make_project("c/react", title="React"),
        ]
        ranked = rerank_projects(projects, "react")
        assert [p.id for p in ranked] == ["b/react", "c/react", "a/other"]

    def test_empty_list(self) -> None:
        assert rerank_projects([], "anything") == []

    def test_empty_query_keeps_order(self, make_project) -> None:
        projects = [make_project("b/two"), make_project("a/one")]
        assert rerank_projects(projects, "") == projects

    def test_does_not_mutate_input(self, make_project) -> None:
        projects = [make_project("a/zzz"), make_project("b/react", title="React")]
        original = list(projects)
        ranked = rerank_projects(projects, "react")
        assert projects == original
        assert ranked is not projects
        assert ranked[0].id == "b/react"
