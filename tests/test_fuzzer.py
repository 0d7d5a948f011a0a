"""
Tests for the orchestrator, engine selection and the lightweight twist.
"""

from domaintwist.models.dictionary import Dictionary
from domaintwist.models.engine_selection import Engine, EngineSelection
from domaintwist.services.fuzzer import Fuzzer, generate_domain_variations, resolve_selection, twist_domain
from domaintwist.services.permutation import Permutation
from domaintwist.services.punycode import encode


class TestEngineSelection:
    """Test engine name resolution and selection building."""

    def test_default_is_every_engine(self):
        selection = EngineSelection()
        assert selection.engines == frozenset(Engine)
        assert selection.custom_dictionary is None

    def test_lookup_forms(self):
        assert Engine.lookup("vowel-swap") is Engine.VOWEL_SWAP
        assert Engine.lookup("VOWEL_SWAP") is Engine.VOWEL_SWAP
        assert Engine.lookup("include_vowel_swap") is Engine.VOWEL_SWAP
        assert Engine.lookup("includeVowelSwap") is Engine.VOWEL_SWAP
        assert Engine.lookup("positionSwap") is Engine.POSITION_SWAP
        assert Engine.lookup("nonsense") is None
        assert Engine.lookup(42) is None

    def test_unknown_names_ignored(self):
        selection = EngineSelection(engines=["omission", "nonsense"])
        assert selection.engines == frozenset({Engine.OMISSION})

    def test_ordered_follows_declaration(self):
        selection = EngineSelection(engines=["tld-fusion", "omission", "vowel-swap"])
        assert selection.ordered() == [Engine.VOWEL_SWAP, Engine.OMISSION, Engine.TLD_FUSION]

    def test_from_flags(self):
        """Test engines stay enabled unless their flag is falsy."""
        selection = EngineSelection.from_flags({
            "include_vowel_swap": True,
            "includeAddition": False,
            "bogus": False,
        })
        assert Engine.ADDITION not in selection.engines
        assert Engine.VOWEL_SWAP in selection.engines
        assert len(selection.engines) == len(Engine) - 1

    def test_from_flags_custom_dictionary(self):
        selection = EngineSelection.from_flags({"customDictionary": {"words": ["admin"]}})
        assert isinstance(selection.custom_dictionary, Dictionary)
        assert selection.custom_dictionary.words == ("admin",)

    def test_flat_dictionary_with_categories_key(self):
        """Test a category literally named 'categories' is read like any other."""
        selection = EngineSelection.from_flags({"custom_dictionary": {"words": ["a"], "categories": ["b"]}})
        assert selection.custom_dictionary.words == ("a",)
        assert selection.custom_dictionary.categories == {"categories": ("b",)}

    def test_dictionary_instance_kept(self):
        dictionary = Dictionary(words=("admin",))
        assert EngineSelection(custom_dictionary=dictionary).custom_dictionary == dictionary

    def test_resolve_selection(self):
        assert resolve_selection(None).engines == frozenset(Engine)
        assert resolve_selection(["omission"]).engines == frozenset({Engine.OMISSION})
        assert Engine.OMISSION not in resolve_selection({"include_omission": False}).engines
        selection = EngineSelection(engines=["glyphs"])
        assert resolve_selection(selection) is selection


class TestDomainSplitting:
    """Test how the fuzzer splits its input."""

    def test_simple_domain(self):
        fuzzer = Fuzzer("paypal.com")
        assert (fuzzer.label, fuzzer.suffix) == ("paypal", "com")

    def test_subdomain_dropped(self):
        fuzzer = Fuzzer("www.paypal.co.uk")
        assert (fuzzer.label, fuzzer.suffix) == ("paypal", "co.uk")

    def test_no_suffix_falls_back(self):
        fuzzer = Fuzzer("localhost")
        assert (fuzzer.label, fuzzer.suffix) == ("localhost", "com")

    def test_ace_label_decoded(self):
        fuzzer = Fuzzer("xn--bcher-kva.de")
        assert fuzzer.label == "bücher"
        assert fuzzer.ascii_label == "xn--bcher-kva"
        assert fuzzer.suffix == "de"

    def test_ace_label_engines_see_unicode(self):
        fuzzer = Fuzzer("xn--bcher-kva.de")
        fuzzer.generate(["omission"])
        assert "bcher.de" in fuzzer.domains_list()

    def test_undecodable_ace_label_kept(self):
        fuzzer = Fuzzer("xn--a-!.com")
        assert fuzzer.label == fuzzer.ascii_label


class TestGenerate:
    """Test the orchestrator's generation behaviour."""

    def test_paypal_scenario(self):
        fuzzer = Fuzzer("paypal.com")
        fuzzer.generate()
        domains = fuzzer.domains_list()
        assert "paypa1.com" in domains
        assert "paypal.net" in domains
        assert "paypal.com" not in domains

    def test_no_duplicates(self):
        domains = generate_domain_variations("paypal.com")
        assert len(domains) == len(set(domains))

    def test_deterministic(self):
        assert generate_domain_variations("example.com") == generate_domain_variations("example.com")

    def test_empty_input(self):
        assert generate_domain_variations("") == []

    def test_ace_input_with_highest_code_point(self):
        """Test a decoded label at the top of the code point range runs through every engine."""
        domain = "xn--" + encode("a\U0010FFFF") + ".com"
        assert "b\U0010FFFF.com" in generate_domain_variations(domain, ["bitsquatting"])
        assert generate_domain_variations(domain)

    def test_selection_limits_engines(self):
        fuzzer = Fuzzer("abc.com")
        fuzzer.generate(["omission"])
        assert fuzzer.domains_list() == ["ab.com", "ac.com", "bc.com"]
        assert {p.fuzzer for p in fuzzer.domains} == {"omission"}

    def test_empty_selection(self):
        assert generate_domain_variations("paypal.com", []) == []

    def test_first_engine_is_credited(self):
        """Test a domain produced by two engines belongs to the earlier one."""
        fuzzer = Fuzzer("to.com")
        fuzzer.generate(["unicode", "glyphs"])
        credited = {p.domain: p.fuzzer for p in fuzzer.domains}
        assert credited["t0.com"] == "glyphs"

    def test_flags_selection(self):
        fuzzer = Fuzzer("abc.com")
        fuzzer.generate({"include_addition": False, "include_replacement": False})
        assert {p.fuzzer for p in fuzzer.domains}.isdisjoint({"addition", "replacement"})

    def test_custom_dictionary_replaces_default(self):
        selection = EngineSelection(engines=["dictionary"], custom_dictionary={"words": ["admin"]})
        assert generate_domain_variations("test.com", selection) == [
            "admin-test.com", "admintest.com", "test-admin.com", "testadmin.com",
        ]

    def test_constructor_dictionary(self):
        fuzzer = Fuzzer("test.com", dictionary=Dictionary(words=("shop",)))
        fuzzer.generate(["dictionary"])
        assert len(fuzzer.domains) == 4
        assert "shoptest.com" in fuzzer.domains_list()

    def test_selection_dictionary_wins(self):
        fuzzer = Fuzzer("test.com", dictionary=Dictionary(words=("shop",)))
        fuzzer.generate(EngineSelection(engines=["dictionary"], custom_dictionary={"words": ["admin"]}))
        assert "shoptest.com" not in fuzzer.domains_list()
        assert "admintest.com" in fuzzer.domains_list()

    def test_generate_resets_results(self):
        fuzzer = Fuzzer("abc.com")
        fuzzer.generate(["omission"])
        fuzzer.generate(["hyphenation"])
        assert {p.fuzzer for p in fuzzer.domains} == {"hyphenation"}


class TestPermutations:
    """Test the permutation listing options."""

    def test_sorted_copies(self):
        fuzzer = Fuzzer("abc.com")
        fuzzer.generate(["omission", "hyphenation"])
        result = fuzzer.permutations()
        assert result == sorted(result)
        assert all(isinstance(p, Permutation) for p in result)
        result[0].domain = "changed.com"
        assert "changed.com" not in fuzzer.domains_list()

    def test_valid_only(self):
        fuzzer = Fuzzer("a1.com")
        fuzzer.generate(["bitsquatting"])
        assert "a-.com" in fuzzer.domains_list()
        valid = [p.domain for p in fuzzer.permutations(valid_only=True)]
        assert "a-.com" not in valid
        assert "a2.com" in valid

    def test_unicode_rendering(self):
        fuzzer = Fuzzer("pay.com")
        fuzzer.generate(["homoglyphs"])
        ascii_domains = [p.domain for p in fuzzer.permutations()]
        unicode_domains = [p.domain for p in fuzzer.permutations(unicode=True)]
        assert all(d.startswith("xn--") for d in ascii_domains)
        assert "pаy.com" in unicode_domains

    def test_permutation_equality(self):
        assert Permutation(fuzzer="a", domain="x.com") == Permutation(fuzzer="b", domain="x.com")
        assert len({Permutation(fuzzer="a", domain="x.com"), Permutation(fuzzer="b", domain="x.com")}) == 1


class TestTwistDomain:
    """Test the lightweight twist."""

    def test_expected_variants(self):
        results = twist_domain("test.com")
        for expected in ("www.test.com", "test.net", "7est.com", "tast.com", "tst.com", "te-st.com"):
            assert expected in results

    def test_excludes_original(self):
        assert "test.com" not in twist_domain("test.com")

    def test_without_tld_swap(self):
        results = twist_domain("test.com", include_tld_swap=False)
        assert "test.net" not in results
        assert "www.test.com" in results

    def test_sorted_and_unique(self):
        results = twist_domain("example.org")
        assert results == sorted(set(results))

    def test_empty_input(self):
        assert twist_domain("") == []
