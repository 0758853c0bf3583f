"""Tests for dupfinder.policy — size-based hash skipping."""

from dupfinder.policy import BIG_FILE_SIZE, SMALL_FILE_SIZE, SizePolicy


class TestThresholds:
    def test_small_is_8_mib(self):
        assert SMALL_FILE_SIZE == 8 * 1024 * 1024

    def test_big_is_1024_times_small(self):
        assert BIG_FILE_SIZE == 1024 * SMALL_FILE_SIZE == 8 * 1024 ** 3


class TestShouldSkip:
    """Test the skip decision and its strict boundaries."""

    def test_no_flags_never_skips(self):
        policy = SizePolicy()
        for size in (0, SMALL_FILE_SIZE - 1, BIG_FILE_SIZE + 1):
            assert policy.should_skip(size) is False

    def test_big_boundary_is_strict(self):
        policy = SizePolicy(skip_big=True)
        assert policy.should_skip(BIG_FILE_SIZE + 1) is True
        assert policy.should_skip(BIG_FILE_SIZE) is False

    def test_small_boundary_is_strict(self):
        policy = SizePolicy(skip_small=True)
        assert policy.should_skip(SMALL_FILE_SIZE - 1) is True
        assert policy.should_skip(SMALL_FILE_SIZE) is False
        assert policy.should_skip(0) is True

    def test_big_flag_ignores_small_files(self):
        assert SizePolicy(skip_big=True).should_skip(0) is False

    def test_small_flag_ignores_big_files(self):
        assert SizePolicy(skip_small=True).should_skip(BIG_FILE_SIZE + 1) is False

    def test_both_flags_keep_middle_band(self):
        policy = SizePolicy(skip_big=True, skip_small=True)
        assert policy.should_skip(SMALL_FILE_SIZE - 1) is True
        assert policy.should_skip(SMALL_FILE_SIZE) is False
        assert policy.should_skip(BIG_FILE_SIZE) is False
        assert policy.should_skip(BIG_FILE_SIZE + 1) is True

    def test_custom_thresholds(self):
        policy = SizePolicy(skip_big=True, skip_small=True, big_threshold=100, small_threshold=10)
        assert policy.should_skip(9) is True
        assert policy.should_skip(10) is False
        assert policy.should_skip(100) is False
        assert policy.should_skip(101) is True
