"""Tests for prompt assembly."""

import pytest

from cta_rewriter.models import GenerationRequest
from cta_rewriter.prompts import BASE_INSTRUCTION, KeepWordsPolicy, build_system_prompt
from cta_rewriter.prompts import templates


def _request(**fields) -> GenerationRequest:
    return GenerationRequest(message="Click here to read our guide.", **fields)


class TestBaseInstruction:
    """Tests for the always-present parts of the prompt."""

    def test_minimal_request(self):
        """Test a request with only a message yields base plus em dash rule."""
        prompt = build_system_prompt(_request())

        assert prompt == f"{BASE_INSTRUCTION} {templates.NO_EM_DASH}"

    def test_unset_fields_never_leak(self):
        """Test unset optional fields are omitted rather than rendered."""
        prompt = build_system_prompt(_request())

        assert "None" not in prompt
        assert "Adjust the" not in prompt
        assert "company" not in prompt.lower()

    def test_deterministic(self):
        """Test identical requests produce identical prompts."""
        fields = dict(
            num_suggestions=3,
            playful_professional=-0.5,
            casual_formal=0,
            length=1,
            company_type="bakery",
            ban_words="cheap",
            keep_words="fresh",
            include_explanation=True,
        )
        assert build_system_prompt(_request(**fields)) == build_system_prompt(_request(**fields))


class TestToneAxes:
    """Tests for the bipolar tone directives."""

    def test_negative_leans_to_first_pole(self):
        """Test negative values pick the first pole."""
        prompt = build_system_prompt(_request(playful_professional=-1))

        assert "Adjust the tone: more playful." in prompt
        assert "more professional" not in prompt

    def test_positive_leans_to_second_pole(self):
        """Test positive values pick the second pole."""
        prompt = build_system_prompt(_request(casual_formal=0.3, friendly_authoritative=2))

        assert "Adjust the tone: more formal." in prompt
        assert "Adjust the tone: more authoritative." in prompt

    def test_zero_requests_balance(self):
        """Test an explicit zero asks for a balanced tone."""
        prompt = build_system_prompt(_request(friendly_authoritative=0))

        assert "Keep the tone balanced between friendly and authoritative." in prompt
        assert "Adjust the tone" not in prompt

    def test_axes_in_fixed_order(self):
        """Test tone directives follow playful, casual, friendly order."""
        prompt = build_system_prompt(
            _request(friendly_authoritative=1, casual_formal=-1, playful_professional=1)
        )

        assert (
            prompt.index("more professional")
            < prompt.index("more casual")
            < prompt.index("more authoritative")
        )


class TestLengthAndCount:
    """Tests for length and suggestion count directives."""

    def test_short_length(self):
        """Test negative length asks for short output."""
        assert templates.LENGTH_SHORT in build_system_prompt(_request(length=-2))

    def test_long_length(self):
        """Test positive length asks for long output."""
        assert templates.LENGTH_LONG in build_system_prompt(_request(length=0.5))

    def test_zero_length_adds_nothing(self):
        """Test a zero length slider adds no directive."""
        assert "Adjust the length" not in build_system_prompt(_request(length=0))

    def test_count_directive(self):
        """Test the exact count is requested."""
        prompt = build_system_prompt(_request(num_suggestions=4))

        assert "Provide exactly 4 distinct suggestions" in prompt
        assert "just the numbered list." in prompt

    def test_non_positive_count_ignored(self):
        """Test zero or negative counts are treated as unset."""
        assert "Provide exactly" not in build_system_prompt(_request(num_suggestions=0))
        assert "Provide exactly" not in build_system_prompt(_request(num_suggestions=-2))

    def test_count_allows_explanation(self):
        """Test the count directive leaves room for a requested explanation."""
        prompt = build_system_prompt(_request(num_suggestions=2, include_explanation=True))

        assert "just the numbered list followed by the requested explanation." in prompt
        assert templates.EXPLANATION_INSTRUCTION in prompt
        assert "'Explanation:'" in prompt


class TestContextAndWords:
    """Tests for business context, ban words and keep words."""

    def test_business_context_inserted_verbatim(self):
        """Test business context values appear as given."""
        prompt = build_system_prompt(
            _request(
                company_type="SaaS startup",
                what_company_does="We build invoicing tools",
                target_audience="freelance designers",
            )
        )

        assert "The company is a SaaS startup." in prompt
        assert "What the company does: We build invoicing tools." in prompt
        assert "The target audience is: freelance designers." in prompt

    def test_blank_text_fields_omitted(self):
        """Test whitespace-only values are treated as absent."""
        prompt = build_system_prompt(_request(company_type="   ", ban_words="", keep_words=" "))

        assert prompt == f"{BASE_INSTRUCTION} {templates.NO_EM_DASH}"

    def test_ban_words(self):
        """Test ban words are listed in a prohibition."""
        prompt = build_system_prompt(_request(ban_words="cheap, free"))

        assert "Never use any of the following words or phrases: cheap, free." in prompt

    def test_hard_keep_words_prepended(self):
        """Test the hard policy puts keep words before the base instruction."""
        prompt = build_system_prompt(_request(keep_words="Acme, pro plan"))

        assert prompt.startswith(
            "ABSOLUTE REQUIREMENT: every suggestion must contain the following words or "
            "phrases exactly as written: Acme, pro plan."
        )
        assert "Ensure the suggestions include" not in prompt

    def test_soft_keep_words_appended(self):
        """Test the soft policy puts keep words last."""
        prompt = build_system_prompt(
            _request(keep_words="Acme", ban_words="cheap"), KeepWordsPolicy.SOFT
        )

        assert prompt.startswith(BASE_INSTRUCTION)
        assert prompt.endswith(
            "Ensure the suggestions include the following words or phrases: Acme."
        )
        assert "ABSOLUTE REQUIREMENT" not in prompt

    def test_policy_accepts_string(self):
        """Test the policy can be given by value."""
        prompt = build_system_prompt(_request(keep_words="Acme"), "soft")

        assert prompt.endswith("Acme.")

    def test_unknown_policy_rejected(self):
        """Test an unknown policy raises."""
        with pytest.raises(ValueError):
            build_system_prompt(_request(), "sometimes")


class TestDirectiveOrder:
    """Tests for the overall directive ordering."""

    def test_full_order(self):
        """Test every directive appears in the fixed order."""
        prompt = build_system_prompt(
            _request(
                include_explanation=True,
                num_suggestions=3,
                playful_professional=1,
                length=-1,
                company_type="bakery",
                what_company_does="sells bread",
                target_audience="locals",
                ban_words="cheap",
                keep_words="sourdough",
            ),
            KeepWordsPolicy.SOFT,
        )

        markers = [
            BASE_INSTRUCTION,
            templates.NO_EM_DASH,
            templates.EXPLANATION_INSTRUCTION,
            "Provide exactly 3",
            "more professional",
            "short and punchy",
            "The company is a bakery.",
            "What the company does: sells bread.",
            "The target audience is: locals.",
            "Never use any of the following words or phrases: cheap.",
            "Ensure the suggestions include the following words or phrases: sourdough.",
        ]
        positions = [prompt.index(marker) for marker in markers]
        assert positions == sorted(positions)


class TestGenerationRequest:
    """Tests for request parsing."""

    def test_accepts_camel_case(self):
        """Test frontend camelCase fields populate the model."""
        request = GenerationRequest.model_validate({
            "message": "Click here",
            "numSuggestions": "3",
            "casualFormal": 0,
            "includeExplanation": True,
            "keepWords": "Acme",
        })

        assert request.num_suggestions == 3
        assert request.casual_formal == 0
        assert request.include_explanation is True
        assert request.keep_words == "Acme"
        assert request.playful_professional is None

    def test_length_hint(self):
        """Test the signed length maps onto hints."""
        assert _request().length_hint.value == "default"
        assert _request(length=0).length_hint.value == "default"
        assert _request(length=-0.1).length_hint.value == "short"
        assert _request(length=3).length_hint.value == "long"

    def test_blank_and_unparseable_numbers_unset(self):
        """Test empty or non-numeric counts and sliders become None."""
        request = GenerationRequest.model_validate({
            "message": "Click here",
            "numSuggestions": "",
            "length": "long",
            "playfulProfessional": " ",
            "friendlyAuthoritative": [1],
        })

        assert request.num_suggestions is None
        assert request.length is None
        assert request.playful_professional is None
        assert request.friendly_authoritative is None
        assert request.requested_count is None

    def test_numeric_strings_parsed(self):
        """Test numeric strings from form inputs are read as numbers."""
        request = GenerationRequest.model_validate({
            "numSuggestions": "2.0",
            "length": "-0.5",
            "casualFormal": "1",
        })

        assert request.num_suggestions == 2
        assert request.length == -0.5
        assert request.casual_formal == 1.0

    def test_non_string_text_fields_absent(self):
        """Test non-text values for text fields are treated as absent."""
        request = GenerationRequest.model_validate({
            "message": 42,
            "companyType": {"name": "bakery"},
            "banWords": ["cheap"],
        })

        assert request.message is None
        assert request.company_type is None
        assert request.ban_words is None

    @pytest.mark.parametrize(
        "value, expected",
        [("", False), ("false", False), ("0", False), ("true", True), ("please", True), (1, True), (None, False)],
    )
    def test_explanation_flag(self, value, expected):
        """Test the explanation flag accepts form-style values."""
        request = GenerationRequest.model_validate({"includeExplanation": value})

        assert request.include_explanation is expected
