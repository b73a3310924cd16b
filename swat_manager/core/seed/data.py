"""
Declarative seed data.

The official SWAT Tier Level Assessment template (16 categories, every
question a Yes/No that counts toward the tier) and the Gap Analysis template
(8 categories that never count toward the tier), plus the sample agencies
created on a fresh install. ``loader.seed_database`` applies this table
idempotently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class QuestionSeed:
    text: str
    question_type: str = "boolean"
    description: Optional[str] = None


@dataclass(frozen=True)
class CategorySeed:
    name: str
    description: str
    order_index: int
    impacts_tier: bool
    questions: Tuple[QuestionSeed, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class AgencySeed:
    name: str
    jurisdiction: str
    contact_name: str
    contact_email: str
    contact_phone: str


def _yes_no(*texts: str) -> Tuple[QuestionSeed, ...]:
    return tuple(QuestionSeed(text) for text in texts)


def _tier(order_index: int, name: str, *texts: str) -> CategorySeed:
    return CategorySeed(
        name=name,
        description=f"Official SWAT Tier Level Assessment category: {name}",
        order_index=order_index,
        impacts_tier=True,
        questions=_yes_no(*texts),
    )


def _gap(order_index: int, name: str, description: str, *questions: QuestionSeed) -> CategorySeed:
    return CategorySeed(
        name=name, description=description, order_index=order_index, impacts_tier=False, questions=questions
    )


TIER_CATEGORIES: Tuple[CategorySeed, ...] = (
    _tier(
        1,
        "Tier 1-4 Metrics (Personnel & Leadership)",
        "Do you have 34 or more total members?",
        "Do you have 25-33 members?",
        "Do you have 16-24 members?",
        "Do you have 15 or fewer members?",
        "Do you have a designated team commander?",
        "Do you have 4 or more team leaders?",
        "Do you have 2 or fewer team leaders?",
        "Do you have 8 or more snipers?",
        "Do you have 6-7 snipers?",
        "Do you have 18 or more dedicated entry operators?",
        "Do you have 12-17 dedicated entry operators?",
        "Do you have 11 or fewer dedicated entry operators?",
        "Do you have 3 or more TEMS personnel?",
        "Do you have 2 TEMS personnel?",
        "Do you have at least 1 TEMS personnel?",
    ),
    _tier(
        2,
        "Mission Profiles",
        "Do you train and prepare for terrorist response operations?",
        "Do you train and conduct critical infrastructure protection?",
        "Do you train and conduct dignitary protection operations?",
        "Do you train and prepare for sniper operations?",
        "Do you train or conduct man-tracking operations (rural/woodland)?",
    ),
    _tier(
        3,
        "Individual Operator Equipment",
        "Do all your members have at least Level IIIA body armor & rifle plates?",
        "Do all your members have at least Level IIIA ballistic helmets?",
        "Do all operators have helmet-mounted white light systems?",
        "Do all operators have helmet-mounted IR light source?",
        "Do all operators have gas masks?",
        "Do all operators have voice amplifiers for gas masks?",
        "Do all members have integrated communications (team-wide)?",
        "Do all operators have Level 2+ retention holsters?",
        "Do all members have noise-canceling ear protection?",
        "Do all operators have Night Vision (BNVD, Monocular, PANO)?",
    ),
    _tier(
        4,
        "Sniper Equipment & Operations",
        "Do you maintain training records, lesson plans, and research selection processes for snipers?",
        "Do you maintain certifications, qualifications, and records of weapons modifications & ammo inventories?",
        "Do snipers have a hydration system?",
        "Do snipers have a spotting scope?",
        "Do snipers have a long-range camera system?",
        "Do snipers have binoculars?",
        "Do snipers have a rangefinder?",
        "Do snipers have a white light source?",
        "Do snipers have a hands-free white light or low-visibility red/green/blue light?",
        "Does each sniper have night vision (BNVD, Monocular, PANO)?",
        "Does each sniper have a precision rifle?",
        "Do snipers maintain a logbook for maintenance & tracking rifle performance?",
        "Do snipers use magnified optics?",
        "Do snipers have clip-on night vision for magnified optics?",
        "Do snipers have an IR illuminator?",
        "Do snipers have an IR laser handheld for target identification?",
        "Are snipers equipped with ammunition capable of engagements through intermediate glass?",
    ),
    _tier(
        5,
        "Breaching Operations",
        "Does your team have manual breaching tools?",
        "Does your team have hydraulic breaching tools?",
        "Does your team have ballistic breaching capability?",
        "Does your team have thermal/exothermic breaching capability?",
        "Does your team have explosive breaching capability?",
        "Does your team have mechanical breaching capability?",
    ),
    _tier(
        6,
        "Access & Elevated Tactics",
        "Does your team have ladder systems?",
        "Does your team have rappel equipment?",
        "Does your team have fast-rope equipment?",
        "Does your team have elevated rescue equipment?",
        "Does your team have pole cameras or other surveillance equipment?",
        "Does your team have tactical mirrors?",
    ),
    _tier(
        7,
        "Less-Lethal Capabilities",
        "Does your team have extended range impact munitions?",
        "Does your team have pepper ball systems?",
        "Does your team have electronic control weapons (ECW/Tasers)?",
    ),
    _tier(
        8,
        "Noise Flash Diversionary Devices (NFDDs)",
        "Does your team have hand-deployed distraction devices?",
        "Does your team have pole-deployed distraction devices?",
        "Does your team have multiple port capability for NFDDs?",
        "Does your team have time-delay capability for NFDDs?",
    ),
    _tier(
        9,
        "Chemical Munitions",
        "Does your team have chemical munitions projectors?",
        "Does your team have hand-deployed CS?",
        "Does your team have hand-deployed OC?",
        "Does your team have hand-deployed smoke?",
        "Does your team have a 37mm deployment system?",
        "Does your team have a 40mm deployment system?",
        "Does your team have multi-launcher deployment systems?",
        "Does your team have pole-deployed chemical munitions?",
        "Does your team have time-delayed chemical devices?",
        "Does your team have Vapor-OC/CS systems?",
        "Does your team have fogger system/pepper fogger?",
        "Does your team have a water cannon?",
        "Does your team have OC grenades?",
        "Does your team have CS grenades?",
        "Does your team have smoke grenades?",
        "Does your team have IR obscuring smoke?",
        "Does your team have pyrotechnic delivery systems?",
    ),
    _tier(
        10,
        "K9 Operations & Integration",
        "Does your team have patrol K9s?",
        "Does your team have tactical K9s?",
        "Does your team have explosive detection K9s?",
        "Does your team have narcotics detection K9s?",
        "Does your team have tracking K9s?",
        "Does your team have bloodhounds?",
        "Does your team have cadaver/HRD K9s?",
        "Does your team have comfort K9s?",
        "Does your team integrate K9s in tactical operations?",
    ),
    _tier(
        11,
        "Explosive Ordnance Disposal (EOD) Support",
        "Does your team have EOD capability or trained EOD personnel?",
        "Is your team equipped with robot(s) for EOD operations?",
        "Does your team have access to x-ray capability for suspicious packages?",
        "Does your team have or have access to EOD bomb suits?",
        "Does your team have or have access to EOD disruption devices?",
    ),
    _tier(
        12,
        "Mobility, Transportation & Armor Support",
        "Does your team have vehicles specifically equipped for SWAT operations?",
        "Does your team have armored vehicles?",
        "Does your team have vehicles with integrated breaching platforms?",
        "Does your team have vehicles with rescue platforms?",
        "Does your team have vehicles with mobile command & control platforms?",
        "Does your team have off-road vehicle capabilities (ATVs, UTVs, dirt bikes)?",
        "Does your team have snow and ice capabilities (Snowmobiles, ATVs w/tracks)?",
        "Does your team have access to helicopters for insertions?",
        "Does your team have access to fixed-wing aircraft?",
        "Does your team have air-operations capabilities?",
        "Does your team have rappel capabilities from aircraft?",
        "Does your team have fast-rope capabilities from aircraft?",
        "Does your team have water vessels for tactical operations?",
        "Does your team operate in maritime environments?",
    ),
    _tier(
        13,
        "Unique Environment & Technical Capabilities",
        "Does your team have dive capabilities?",
        "Does your team have mountain or high-angle rescue capabilities?",
        "Does your team have drone/UAS capabilities?",
        "Does your team have robots for tactical operations?",
    ),
    _tier(
        14,
        "SCBA & HAZMAT Capabilities",
        "Does your team have SCBA equipment?",
        "Does your team have HAZMAT suits?",
    ),
    _tier(
        15,
        "Tactical Emergency Medical Support (TEMS)",
        "Does your team have at least one TEMS member?",
        "Does your team have trauma bags/kits?",
        "Does your team have rescue litters/stretchers?",
        "Does your team have tactical extraction capabilities?",
        "Does your team have medical evacuation protocols for injured operators?",
        "Does your team have medical evacuation protocols for injured suspects?",
        "Does your team have medical evacuation protocols for injured civilians?",
        "Does your team maintain TECC equipment (tourniquets, hemostatics, etc.)?",
        "Does your team have needle decompression capability?",
        "Does your team have chest tube capability?",
        "Does your team have surgical airway capability?",
    ),
    _tier(
        16,
        "Negotiations & Crisis Response",
        "Does your team have a dedicated negotiation element?",
        "Does your team have trained crisis negotiators?",
        "Does your team have negotiation equipment (throw phones, etc.)?",
        "Does your team train for hostage negotiation scenarios?",
        "Does your team have mental health professionals available for consultations?",
        "Does your team have a crisis response protocol?",
        "Does your team train jointly with negotiators?",
    ),
)

GAP_ANALYSIS_CATEGORIES: Tuple[CategorySeed, ...] = (
    _gap(
        17,
        "Team Structure and Chain of Command",
        "Assessment of team organizational structure and command hierarchy",
        *_yes_no(
            "Does your team have a written policy outlining team organization and function which includes an "
            "organizational chart?",
            "Does your agency have a formal, written policy defining the chain of command and leadership hierarchy "
            "within the SWAT team?",
            "Is the SWAT team organized into squads or elements, with clearly defined leaders (e.g., team leaders, "
            "squad leaders, unit commanders)?",
            "Does your policy specify the maximum number of personnel that a single team leader or supervisor can "
            "effectively manage (e.g., a ratio of 1 supervisor for every 5–7 operators)?",
            "Is there a designated second-in-command or deputy team leader to ensure continuity of command in case "
            "the primary leader is unavailable or incapacitated?",
            "Are SWAT team leaders trained in leadership and management principles specific to tactical law "
            "enforcement operations?",
        ),
    ),
    _gap(
        18,
        "Supervisor-to-Operator Ratio",
        "Assessment of supervision levels and supervisory ratios",
        QuestionSeed(
            "What is the current supervisor-to-operator ratio within your SWAT team?",
            question_type="text",
            description="Enter as a ratio (e.g., 1:5) or a decimal",
        ),
        *_yes_no(
            "Does your agency policy mandate that this ratio is maintained at all times during both training and "
            "operational deployments?",
            "Do team leaders regularly evaluate the span of control to ensure that the supervisor-to-operator ratio "
            "remains manageable during large-scale or extended operations?",
            "Is there a maximum span of control limit established in your agency policy for high-risk tactical "
            "operations?",
        ),
    ),
    _gap(
        19,
        "Span of Control Adjustments for Complex Operations",
        "Assessment of span of control adaptability for various operational scenarios",
        *_yes_no(
            "Does your agency policy allow for adjustments to the span of control based on the complexity of the "
            "operation (e.g., larger teams for multi-location operations, hostage situations, or active shooter "
            "incidents)?",
            "In complex or large-scale operations, are additional supervisors or command staff assigned to support "
            "the SWAT team leadership?",
            "Does your policy provide for the delegation of specific tasks to subordinate leaders or specialists "
            "(e.g., breaching, sniper oversight, communications) to reduce the burden on the SWAT team commander?",
            "Are command post personnel integrated into the span of control policy, ensuring that field leaders "
            "have adequate support for communication and coordination?",
        ),
    ),
    _gap(
        20,
        "Training and Evaluation of Leadership",
        "Assessment of leadership training programs and evaluation methods",
        *_yes_no(
            "Are team leaders and supervisors required to undergo leadership training specific to tactical "
            "environments, including decision-making under stress, task delegation, and team management?",
            "Does your agency provide leadership development programs for SWAT supervisors to continuously improve "
            "their command and control skills?",
        ),
    ),
    _gap(
        21,
        "Equipment Procurement and Allocation",
        "Assessment of equipment acquisition processes and distribution methodology",
        *_yes_no(
            "Does your agency have a formal, written policy for the procurement and allocation of tactical "
            "equipment for SWAT operations?",
            "Is the equipment procurement process reviewed regularly to ensure that SWAT teams have access to the "
            "latest technology and tools?",
            "Are equipment purchases approved through a dedicated budget, and are funding sources clearly "
            "identified?",
            "Does your agency conduct regular assessments to ensure that SWAT teams are equipped with "
            "mission-specific gear tailored to the environments they are most likely to operate in (e.g., urban, "
            "rural, high-risk situations)?",
        ),
    ),
    _gap(
        22,
        "Equipment Maintenance and Inspection",
        "Assessment of equipment maintenance protocols and inspection procedures",
        *_yes_no(
            "Is there a formal maintenance policy in place that outlines the frequency and scope of inspections for "
            "all SWAT equipment (e.g., firearms, body armor, communication devices)?",
            "Does your agency maintain detailed maintenance logs and records of repairs for all equipment used by "
            "the SWAT team?",
            "Are there dedicated personnel or technicians assigned to oversee the maintenance and repair of "
            "specialized equipment such as armored vehicles, breaching tools, and night vision devices?",
        ),
    ),
    _gap(
        23,
        "Equipment Inventory Management",
        "Assessment of inventory tracking systems and accountability measures",
        *_yes_no(
            "Does your agency have a centralized inventory management system to track all SWAT equipment, "
            "including issuance, return, and maintenance records?",
            "Is there a process in place for issuing and returning equipment before and after SWAT operations, "
            "ensuring accountability for all items?",
            "Are inventory audits conducted on a regular basis to ensure all SWAT equipment is accounted for and "
            "serviceable?",
            "Does your inventory system include expiration tracking for time-sensitive equipment such as medical "
            "supplies, body armor, and chemical agents?",
        ),
    ),
    _gap(
        24,
        "Standard Operating Guidelines (SOGs)",
        "Assessment of established operating procedures and tactical guidelines",
        *_yes_no(
            "Does your agency have written Standard Operating Procedures (SOPs) in place for all SWAT-related "
            "operations?",
            "Are the SOPs reviewed and updated regularly (e.g., annually) to reflect changes in tactics, technology, "
            "legal standards, or best practices?",
            "Do your SOPs outline specific protocols for common SWAT operations such as barricaded suspects, "
            "hostage rescues, high-risk warrant service, and active shooter incidents?",
            "Are your SOPs accessible to all SWAT team members, including newly assigned personnel and support "
            "staff?",
            "Are SWAT team members trained on the specific SOPs for each type of operation before deployment, "
            "ensuring full understanding of the procedures?",
            "Do your SOPs include detailed guidance on the use of force, including lethal and less-lethal options, "
            "to ensure legal compliance and safety?",
            "Are there SOPs in place for interagency cooperation and mutual aid responses, particularly for "
            "large-scale incidents?",
            "Does your agency conduct after-action reviews (AARs) for every operation to evaluate adherence to SOPs "
            "and identify areas for improvement?",
        ),
    ),
)

CATEGORIES: Tuple[CategorySeed, ...] = TIER_CATEGORIES + GAP_ANALYSIS_CATEGORIES

ADMIN_FIRST_NAME = "Admin"
ADMIN_LAST_NAME = "User"
ADMIN_PERMISSIONS = {"read": True, "write": True, "edit": True, "delete": True}

SAMPLE_AGENCIES: Tuple[AgencySeed, ...] = (
    AgencySeed(
        name="Los Angeles Police Department",
        jurisdiction="Los Angeles, CA",
        contact_name="John Smith",
        contact_email="jsmith@lapd.gov",
        contact_phone="213-555-1234",
    ),
    AgencySeed(
        name="Miami-Dade Police Department",
        jurisdiction="Miami, FL",
        contact_name="Maria Rodriguez",
        contact_email="mrodriguez@mdpd.gov",
        contact_phone="305-555-6789",
    ),
    AgencySeed(
        name="Chicago Police Department",
        jurisdiction="Chicago, IL",
        contact_name="David Johnson",
        contact_email="djohnson@cpd.gov",
        contact_phone="312-555-9876",
    ),
)
