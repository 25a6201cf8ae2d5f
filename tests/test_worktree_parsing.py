"""Tests for parsing `git worktree list --porcelain`"""

from gwt.services.git.worktrees import parse_worktree_list

TWO_WORKTREES = (
    "worktree /src/project\n"
    "HEAD 1234567890abcdef1234567890abcdef12345678\n"
    "branch refs/heads/main\n"
    "\n"
    "worktree /src/project-hotfix\n"
    "HEAD abcdef1234567890abcdef1234567890abcdef12\n"
    "detached\n"
    "\n"
)


class TestParseWorktreeList:
    """Test the porcelain parser."""

    def test_two_records(self):
        """A branch worktree and a detached worktree give two records."""
        worktrees = parse_worktree_list(TWO_WORKTREES)

        assert len(worktrees) == 2
        main, detached = worktrees

        assert main.path == "/src/project"
        assert main.branch_name == "main"
        assert main.commit_sha == "1234567"
        assert main.is_main is True
        assert main.is_detached is False

        assert detached.path == "/src/project-hotfix"
        assert detached.branch_name == "HEAD"
        assert detached.is_detached is True
        assert detached.is_main is False

    def test_only_first_record_is_main(self):
        output = TWO_WORKTREES + (
            "worktree /src/project-feature-x\n"
            "HEAD 0000000000000000000000000000000000000000\n"
            "branch refs/heads/feature/x\n"
        )
        worktrees = parse_worktree_list(output)

        assert [wt.is_main for wt in worktrees] == [True, False, False]

    def test_branch_prefix_stripped(self):
        output = "worktree /a\nHEAD 1111111111\nbranch refs/heads/feature/sub/branch\n"
        (worktree,) = parse_worktree_list(output)

        assert worktree.branch_name == "feature/sub/branch"

    def test_last_record_without_trailing_blank_line(self):
        worktrees = parse_worktree_list(TWO_WORKTREES.rstrip("\n"))
        assert len(worktrees) == 2

    def test_record_ends_at_next_worktree_line(self):
        output = (
            "worktree /a\nHEAD 1111111111\nbranch refs/heads/main\n"
            "worktree /b\nHEAD 2222222222\nbranch refs/heads/dev\n"
        )
        worktrees = parse_worktree_list(output)

        assert [(wt.path, wt.branch_name) for wt in worktrees] == [("/a", "main"), ("/b", "dev")]

    def test_prunable_flag(self):
        output = (
            "worktree /a\nHEAD 1111111111\nbranch refs/heads/main\n\n"
            "worktree /gone\nHEAD 2222222222\nbranch refs/heads/old\n"
            "prunable gitdir file points to non-existent location\n\n"
        )
        worktrees = parse_worktree_list(output)

        assert worktrees[0].is_prunable is False
        assert worktrees[1].is_prunable is True

    def test_locked_and_bare_lines_ignored(self):
        output = "worktree /a\nbare\n\nworktree /b\nHEAD 2222222222\nbranch refs/heads/x\nlocked\n\n"
        worktrees = parse_worktree_list(output)

        assert [wt.path for wt in worktrees] == ["/a", "/b"]
        assert worktrees[1].branch_name == "x"

    def test_current_flag_exact_match(self):
        worktrees = parse_worktree_list(TWO_WORKTREES, current_path="/src/project-hotfix")

        assert [wt.is_current for wt in worktrees] == [False, True]

    def test_current_flag_not_set_for_subdirectory(self):
        worktrees = parse_worktree_list(TWO_WORKTREES, current_path="/src/project/sub")

        assert not any(wt.is_current for wt in worktrees)

    def test_paths_with_spaces(self):
        output = "worktree /src/my project\nHEAD 1111111111\nbranch refs/heads/main\n"
        (worktree,) = parse_worktree_list(output)

        assert worktree.path == "/src/my project"

    def test_empty_output(self):
        assert parse_worktree_list("") == []
