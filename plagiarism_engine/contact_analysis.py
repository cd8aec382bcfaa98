"""
Plagiarism Engine - Contact Information Analysis

Reports the contact details (emails, URLs, phone numbers) that the
normalizer masks out of both documents, and which of them appear verbatim
in both. Shared contact details are excluded from scoring, but reviewers
still want to know about them.
"""
from dataclasses import dataclass, field
from typing import List

from plagiarism_engine.rules import CONTACT_LABEL_RULE, EMAIL_RULE, PHONE_RULE, URL_RULE

NO_CONTACTS_NOTE = 'Tidak ada informasi kontak yang perlu difilter'


@dataclass
class ContactAnalysis:
    emails_filtered: int = 0
    urls_filtered: int = 0
    phones_filtered: int = 0
    contacts_filtered: int = 0
    details: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            'emailsFiltered': self.emails_filtered,
            'urlsFiltered': self.urls_filtered,
            'phonesFiltered': self.phones_filtered,
            'contactsFiltered': self.contacts_filtered,
            'details': list(self.details)
        }


def _identical(target_items: List[str], source_items: List[str]) -> List[str]:
    """Target items also present in the source, duplicates kept"""
    return [item for item in target_items if item in source_items]


def analyze_contact_information(target_text: str, source_text: str) -> ContactAnalysis:
    target_emails = EMAIL_RULE.find_all(target_text)
    source_emails = EMAIL_RULE.find_all(source_text)
    target_urls = URL_RULE.find_all(target_text)
    source_urls = URL_RULE.find_all(source_text)
    target_phones = PHONE_RULE.find_all(target_text)
    source_phones = PHONE_RULE.find_all(source_text)

    analysis = ContactAnalysis(
        emails_filtered=len(target_emails) + len(source_emails),
        urls_filtered=len(target_urls) + len(source_urls),
        phones_filtered=len(target_phones) + len(source_phones),
        contacts_filtered=len(CONTACT_LABEL_RULE.find_all(target_text))
        + len(CONTACT_LABEL_RULE.find_all(source_text))
    )

    for label, target_items, source_items in (
            ('alamat email', target_emails, source_emails),
            ('URL', target_urls, source_urls),
            ('nomor telepon', target_phones, source_phones)):
        identical = _identical(target_items, source_items)
        if identical:
            analysis.details.append(
                f"{len(identical)} {label} identik ditemukan dan diabaikan dari analisis plagiarisme")

    if analysis.emails_filtered + analysis.urls_filtered + analysis.phones_filtered == 0:
        analysis.details.append(NO_CONTACTS_NOTE)

    return analysis
