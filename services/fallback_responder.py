import logging
from typing import List, NamedTuple, Tuple

from models import QueryResult
from utils.answer_scoring import generate_reasoning

logger = logging.getLogger(__name__)

DEMO_SOURCES = ("Demo Policy Document", "Terms & Conditions")

class CannedAnswer(NamedTuple):
    answer: str
    confidence: float

class KeywordGroup(NamedTuple):
    name: str
    keywords: Tuple[str, ...]
    answer: CannedAnswer

# Checked in order, first match wins
KEYWORD_GROUPS = (
    KeywordGroup(
        "grace_period",
        ("grace period", "premium payment"),
        CannedAnswer(
            "A grace period of thirty days is provided for premium payment after the due date to renew or continue the policy without losing continuity benefits.",
            0.92,
        ),
    ),
    KeywordGroup(
        "maternity",
        ("maternity", "pregnancy"),
        CannedAnswer(
            "Yes, the policy covers maternity expenses, including childbirth and lawful medical termination of pregnancy. To be eligible, the female insured person must have been continuously covered for at least 24 months. The benefit is limited to two deliveries or terminations during the policy period.",
            0.90,
        ),
    ),
    KeywordGroup(
        "waiting_period",
        ("waiting period", "pre-existing"),
        CannedAnswer(
            "There is a waiting period of thirty-six (36) months of continuous coverage from the first policy inception for pre-existing diseases and their direct complications to be covered.",
            0.95,
        ),
    ),
    KeywordGroup(
        "room_rent",
        ("room rent", "icu", "sub-limit"),
        CannedAnswer(
            "Yes, for Plan A, the daily room rent is capped at 1% of the Sum Insured, and ICU charges are capped at 2% of the Sum Insured. These limits do not apply if the treatment is taken in a Preferred Provider Network (PPN).",
            0.88,
        ),
    ),
    KeywordGroup(
        "no_claim_discount",
        ("no claim discount", "ncd"),
        CannedAnswer(
            "A No Claim Discount of 5% on the base premium is offered on renewal for a one-year policy term if no claims were made in the preceding year. The maximum aggregate NCD is capped at 5% of the total base premium.",
            0.93,
        ),
    ),
    KeywordGroup(
        "cataract",
        ("cataract", "surgery"),
        CannedAnswer(
            "The policy has a specific waiting period of two (2) years for cataract surgery from the policy inception date.",
            0.87,
        ),
    ),
    KeywordGroup(
        "ayush",
        ("ayush", "alternative medicine"),
        CannedAnswer(
            "The policy covers medical expenses for inpatient treatment under Ayurveda, Yoga, Naturopathy, Unani, Siddha, and Homeopathy systems up to the Sum Insured limit, provided the treatment is taken in an AYUSH Hospital.",
            0.85,
        ),
    ),
)

DEFAULT_ANSWER = CannedAnswer(
    "Based on the policy document analysis, this query requires specific clause verification. Please refer to the detailed policy terms and conditions for comprehensive coverage information.",
    0.70,
)

class FallbackResponder:
    """
    Local stand-in for the query API
    Matches each question against fixed policy topics so the interface stays usable offline
    """
    
    def __init__(self, groups=KEYWORD_GROUPS, default: CannedAnswer = DEFAULT_ANSWER):
        self.groups = groups
        self.default = default
    
    def match(self, question: str) -> CannedAnswer:
        """Return the canned answer of the first keyword group found in the question"""
        question_lower = question.lower()
        
        for group in self.groups:
            if any(keyword in question_lower for keyword in group.keywords):
                logger.debug(f"Fallback match: {group.name} -> {question[:50]}")
                return group.answer
        
        return self.default
    
    def respond(self, questions: List[str]) -> List[QueryResult]:
        """Build demo results, one per question and in the same order"""
        results = []
        
        for question in questions:
            canned = self.match(question)
            results.append(QueryResult(
                question=question,
                answer=canned.answer,
                confidence=canned.confidence,
                sources=list(DEMO_SOURCES),
                reasoning=generate_reasoning(question, canned.answer),
            ))
        
        logger.info(f"Generated {len(results)} demo responses")
        return results
