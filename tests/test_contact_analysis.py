"""Tests for contact information analysis."""

from plagiarism_engine.contact_analysis import NO_CONTACTS_NOTE, analyze_contact_information


def test_identical_email_is_reported():
    analysis = analyze_contact_information(
        "Kirim ke budi@example.com sekarang", "Email budi@example.com untuk info")

    assert analysis.emails_filtered == 2
    assert analysis.urls_filtered == 0
    assert analysis.phones_filtered == 0
    assert analysis.details == [
        "1 alamat email identik ditemukan dan diabaikan dari analisis plagiarisme"
    ]


def test_no_contacts():
    analysis = analyze_contact_information("kucing tidur", "harimau berburu")
    assert analysis.details == [NO_CONTACTS_NOTE]
    assert analysis.contacts_filtered == 0


def test_repeated_target_items_are_each_counted():
    analysis = analyze_contact_information(
        "a@example.com dan a@example.com", "hubungi a@example.com")
    assert analysis.details[0].startswith("2 alamat email identik")


def test_different_contacts_are_counted_but_not_reported():
    analysis = analyze_contact_information("a@example.com", "b@example.com")
    assert analysis.emails_filtered == 2
    assert analysis.details == []


def test_identical_phone_and_url():
    analysis = analyze_contact_information(
        "Telepon 081234567890 atau https://kampus.ac.id/info",
        "Nomor 081234567890, situs https://kampus.ac.id/info",
    )
    assert analysis.phones_filtered == 2
    assert analysis.urls_filtered == 2
    assert "1 URL identik ditemukan dan diabaikan dari analisis plagiarisme" in analysis.details
    assert "1 nomor telepon identik ditemukan dan diabaikan dari analisis plagiarisme" in analysis.details


def test_contact_labels_are_counted():
    analysis = analyze_contact_information("kontak: budi", "WA: 0812")
    assert analysis.contacts_filtered == 2


def test_to_dict_uses_wire_names():
    data = analyze_contact_information("kucing", "harimau").to_dict()
    assert set(data) == {"emailsFiltered", "urlsFiltered", "phonesFiltered", "contactsFiltered", "details"}
