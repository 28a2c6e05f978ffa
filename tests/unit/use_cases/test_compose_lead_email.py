"""Unit tests for ComposeLeadEmail."""

import pytest

from lead_intake.application.use_cases.compose_lead_email import ComposeLeadEmail


@pytest.fixture
def composer():
    return ComposeLeadEmail("SCG Lead Notification", ["Other", "อื่นๆ"])


def test_subject_names_service_and_customer(composer):
    """Test the subject carries service type and full name."""
    email = composer.compose({"serviceType": "Roof Renovation", "fullName": "สมชาย ใจดี"})

    assert email.subject == "SCG Lead Notification: Roof Renovation - สมชาย ใจดี"


def test_new_roof_section(composer):
    """Test new roof leads show area, plan and formatted budget."""
    email = composer.compose(
        {
            "serviceType": "New Roof Installation",
            "houseArea": "180",
            "package": "Premium",
            "constructionPlan": "อื่นๆ",
            "otherPlan": "ต่อเติมชั้นสอง",
            "budget": "350000",
        }
    )

    assert "180 ตร.ม." in email.html_body
    assert "ต่อเติมชั้นสอง" in email.html_body
    assert "350,000 บาท" in email.html_body
    assert "Renovation Budget" not in email.html_body


def test_renovation_section(composer):
    """Test renovation leads show their own fields and units."""
    email = composer.compose(
        {
            "serviceType": "Roof Renovation",
            "houseType": "บ้านเดี่ยว",
            "serviceInterest": "เปลี่ยนหลังคา",
            "roofArea": "95",
            "renovationBudget": "80000",
        }
    )

    assert "Service Interest" in email.html_body
    assert "95 ตร.ม." in email.html_body
    assert "80000 บาท" in email.html_body
    assert "House Area" not in email.html_body


def test_other_checkbox_choice_replaced_in_list(composer):
    """Test "Other" inside a checkbox group is replaced by the detail text."""
    assert composer.resolve_other("รั่วซึม, Other", "นกทำรัง") == "รั่วซึม, นกทำรัง"
    assert composer.resolve_other("รั่วซึม", "unused") == "รั่วซึม"


def test_other_substitution_only_when_sentinel(composer):
    """Test the detail text is ignored when "Other" was not chosen."""
    email = composer.compose(
        {
            "serviceType": "SCG Metal Roof Replacement",
            "houseType": "ทาวน์เฮาส์",
            "otherHouseType": "stale text",
        }
    )

    assert "ทาวน์เฮาส์" in email.html_body
    assert "stale text" not in email.html_body


def test_customer_type_other_substitution(composer):
    """Test the contact form's customer type also resolves "Other"."""
    email = composer.compose(
        {"serviceType": "Roof Renovation", "customerType": "Other", "otherCustomerType": "ผู้รับเหมา"}
    )

    assert "ผู้รับเหมา" in email.html_body


def test_unknown_service_type_has_only_shared_sections(composer):
    """Test unknown service types render without a service-specific section."""
    email = composer.compose({"serviceType": "Gutter Cleaning", "fullName": "A", "roofArea": "1"})

    assert "Gutter Cleaning" in email.html_body
    assert "Roof Area" not in email.html_body
    assert "Customer Information" in email.html_body


def test_values_are_html_escaped(composer):
    """Test customer text cannot inject markup."""
    email = composer.compose({"serviceType": "Roof Renovation", "fullName": "<b>x</b>"})

    assert "<b>x</b>" not in email.html_body
    assert "&lt;b&gt;x&lt;/b&gt;" in email.html_body
