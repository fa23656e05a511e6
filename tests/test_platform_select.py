"""
Tests for platform selection — include/exclude filters over a snapshot.
"""

from goxplat.core.models import Platform
from goxplat.core.services.platform_ops import default_platforms, supported_platforms
from goxplat.core.services.platform_select import select_platforms

GO116 = supported_platforms("go1.16")


def _names(platforms) -> list[str]:
    return [str(p) for p in platforms]


class TestDefaults:
    def test_no_filters_selects_defaults(self):
        assert select_platforms(GO116) == default_platforms("go1.16")

    def test_only_exclusions_filter_defaults(self):
        result = select_platforms(GO116, os_filters=["!windows"])
        assert result
        assert all(p.default for p in result)
        assert not any(p.os == "windows" for p in result)

    def test_exclude_arch_family(self):
        result = select_platforms(GO116, arch_filters=["!arm"])
        assert not any(p.arch == "arm" for p in result)
        assert "linux/arm64" not in _names(result)  # never a default anyway
        assert "linux/amd64" in _names(result)

    def test_malformed_osarch_is_ignored(self):
        assert select_platforms(GO116, osarch_filters=["linux", "a/b/c", "/amd64"]) == (
            default_platforms("go1.16")
        )


class TestIncludes:
    def test_os_selects_non_defaults_too(self):
        result = select_platforms(GO116, os_filters=["linux"])
        assert result
        assert all(p.os == "linux" for p in result)
        assert "linux/ppc64" in _names(result)

    def test_os_and_arch_family(self):
        result = select_platforms(GO116, os_filters=["linux"], arch_filters=["arm"])
        assert _names(result) == ["linux/armv5", "linux/armv6", "linux/armv7", "linux/armv8"]

    def test_canonical_arm_arch(self):
        result = select_platforms(GO116, arch_filters=["armv7"])
        assert _names(result) == ["linux/armv7"]

    def test_arch_only(self):
        result = select_platforms(GO116, arch_filters=["wasm"])
        assert _names(result) == ["js/wasm"]

    def test_osarch_pairs(self):
        result = select_platforms(GO116, osarch_filters=["linux/armv7", "darwin/amd64"])
        assert _names(result) == ["darwin/amd64", "linux/armv7"]

    def test_osarch_union_with_dimensions(self):
        result = select_platforms(
            GO116,
            os_filters=["windows"],
            arch_filters=["386"],
            osarch_filters=["js/wasm"],
        )
        assert _names(result) == ["windows/386", "js/wasm"]

    def test_exclusion_beats_inclusion(self):
        result = select_platforms(GO116, os_filters=["linux"], osarch_filters=["!linux/386"])
        assert "linux/386" not in _names(result)
        assert "linux/amd64" in _names(result)

    def test_unsupported_pair_selects_nothing(self):
        assert select_platforms(GO116, osarch_filters=["plan9/riscv64"]) == ()

    def test_dropped_platform_not_selected(self):
        go115 = supported_platforms("go1.15")
        assert select_platforms(go115, osarch_filters=["darwin/386"]) == ()

    def test_whitespace_is_trimmed(self):
        result = select_platforms(GO116, osarch_filters=[" linux/amd64 "])
        assert _names(result) == ["linux/amd64"]


class TestResultShape:
    def test_duplicates_collapsed(self):
        p = Platform(os="linux", arch="amd64", default=True)
        assert select_platforms((p, p)) == (p,)

    def test_first_duplicate_wins(self):
        result = select_platforms(GO116, osarch_filters=["darwin/arm64"])
        assert len(result) == 1
        assert result[0].default is False  # the 1.5 entry comes first

    def test_input_untouched(self):
        supported = list(GO116)
        select_platforms(supported, os_filters=["!linux"])
        assert supported == list(GO116)

    def test_keeps_supported_order(self):
        result = select_platforms(GO116, os_filters=["darwin", "linux"], arch_filters=["amd64"])
        assert _names(result) == ["darwin/amd64", "linux/amd64"]
