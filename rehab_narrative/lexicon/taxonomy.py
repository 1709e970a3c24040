"""Activity taxonomy for the treatment picker.

Activity -> phase -> subtask -> suggested deficits, keyed by activity id.
Each activity carries the CPT code its units are billed under; several
activities share a code (e.g. Self-Care and IADL Mgmt both bill 97535).
"""
from __future__ import annotations

from pydantic import BaseModel, Field


class Subtask(BaseModel):
    """A selectable task with its suggested deficits."""

    name: str
    deficits: list[str] = Field(default_factory=list)


class Phase(BaseModel):
    """A body-region or functional phase within an activity."""

    id: str
    name: str
    subtasks: list[Subtask] = Field(default_factory=list)

    def subtask(self, name: str) -> Subtask | None:
        return next((s for s in self.subtasks if s.name == name), None)


class ClinicalActivity(BaseModel):
    """A billable clinical activity."""

    id: str
    label: str
    billing_code: str
    phases: list[Phase] = Field(default_factory=list)

    def phase(self, phase_id: str) -> Phase | None:
        return next((p for p in self.phases if p.id == phase_id), None)


def _phase(phase_id: str, name: str, subtasks: list[tuple[str, list[str]]]) -> Phase:
    return Phase(
        id=phase_id,
        name=name,
        subtasks=[Subtask(name=task, deficits=deficits) for task, deficits in subtasks],
    )


# ── Activity Reference Table ─────────────────────────────────────────────────

CLINICAL_ACTIVITIES: dict[str, ClinicalActivity] = {
    "SELF_CARE": ClinicalActivity(
        id="SELF_CARE",
        label="Self-Care (97535)",
        billing_code="97535",
        phases=[
            _phase("hygiene", "Grooming & Hygiene", [
                ("Oral hygiene", ["fine motor coordination", "hand-to-mouth coordination", "sequencing", "decreased activity tolerance"]),
                ("Upper body bathing", ["crossing midline", "shoulder ROM", "tactile discrimination", "decreased upper extremity strength"]),
                ("Shaving/Makeup", ["visual-motor integration", "fine motor coordination", "decreased activity tolerance"]),
            ]),
            _phase("feeding", "Feeding/Eating", [
                ("Utensil manipulation", ["tripod grasp", "forearm supination", "hand-to-mouth coordination", "decreased upper extremity strength"]),
                ("Cup/Glass management", ["grading force", "depth perception", "wrist stability"]),
            ]),
            _phase("toileting", "Toileting Activity", [
                ("Perineal hygiene", ["trunk rotation", "dynamic standing balance", "proprioception", "decreased activity tolerance"]),
                ("Clothing management", ["fine motor coordination", "standing tolerance", "motor planning"]),
            ]),
            _phase("retrieval", "Retrieval & Setup", [
                ("Retrieving clothing", ["dynamic balance", "functional reach", "standing endurance"]),
                ("Distinguishing orientation", ["visual-spatial processing", "sequencing"]),
            ]),
            _phase("donning", "Dressing (Donning)", [
                ("Threading RLE/LLE", ["hip flexion ROM", "static postural stability", "bilateral coordination", "decreased activity tolerance"]),
                ("Pulling to hips", ["core stability", "upper body strength", "dynamic sitting balance"]),
                ("Managing footwear", ["fine motor coordination", "hip flexion ROM", "tactile discrimination"]),
            ]),
            _phase("transfers", "ADL Transfers", [
                ("Toilet transfer", ["safety awareness", "motor planning", "lower body strength", "decreased activity tolerance"]),
                ("Tub/Shower transfer", ["dynamic balance", "safety awareness", "environmental sequencing"]),
            ]),
        ],
    ),
    "THER_ACT": ClinicalActivity(
        id="THER_ACT",
        label="Therapeutic Activity (97530)",
        billing_code="97530",
        phases=[
            _phase("manipulation", "Object Manipulation", [
                ("Fine motor prehension", ["pincer grasp", "finger isolation", "in-hand manipulation"]),
                ("Gross motor reaching", ["dynamic standing balance", "scapular endurance", "visual scanning"]),
            ]),
            _phase("functional_mvmt", "Functional Movement", [
                ("Sit-to-stand mechanics", ["eccentric control", "motor planning", "gluteal activation", "decreased activity tolerance"]),
                ("Bending to floor", ["dynamic balance", "righting reactions", "safety awareness"]),
            ]),
            _phase("carrying", "Load Management", [
                ("Lifting/Carrying", ["core stability", "grip strength", "safety awareness", "load management"]),
                ("Stair negotiation", ["reciprocal patterning", "concentric control", "dynamic balance"]),
            ]),
        ],
    ),
    "THER_EX": ClinicalActivity(
        id="THER_EX",
        label="Therapeutic Exercise (97110)",
        billing_code="97110",
        phases=[
            _phase("activation", "Strength & Activation", [
                ("Isometric holds", ["motor unit recruitment", "muscle guarding", "decreased upper extremity strength"]),
                ("Concentric/Eccentric reps", ["eccentric control", "length-tension relationship", "muscular endurance"]),
            ]),
            _phase("rom", "Mobility & ROM", [
                ("Active/Passive ROM", ["capsular restriction", "soft tissue extensibility", "contracture risk"]),
                ("Joint Mobilization", ["joint arthrokinematics", "pain modulation"]),
            ]),
        ],
    ),
    "NEURO_REED": ClinicalActivity(
        id="NEURO_REED",
        label="Neuro Re-Ed (97112)",
        billing_code="97112",
        phases=[
            _phase("balance", "Postural Control", [
                ("Perturbation training", ["reactive postural control", "vestibular processing"]),
                ("Single-leg stance", ["proprioception", "ankle stability"]),
            ]),
            _phase("coordination", "Coordination", [
                ("Crossing midline", ["motor planning", "bilateral integration"]),
                ("Proprioceptive PNF", ["kinesthetic awareness", "movement fluidity"]),
            ]),
        ],
    ),
    "BALANCE": ClinicalActivity(
        id="BALANCE",
        label="Balance/Vestibular (97112)",
        billing_code="97112",
        phases=[
            _phase("static_dyn", "Static/Dynamic Control", [
                ("Romberg/Tandem stance", ["somatosensory integration", "base of support management"]),
                ("Limits of Stability (LOS)", ["center of gravity control", "ankle strategies"]),
            ]),
            _phase("vestibular", "Vestibular Function", [
                ("VOR x1 / x2 exercises", ["gaze stabilization", "oscillopsia"]),
                ("Head movement w/ tracking", ["visual-vestibular mismatch", "dizziness handicap"]),
            ]),
        ],
    ),
    "IADL": ClinicalActivity(
        id="IADL",
        label="IADL Mgmt (97535)",
        billing_code="97535",
        phases=[
            _phase("home_mgmt", "Home Management", [
                ("Meal Preparation", ["safety awareness", "task sequencing", "functional endurance"]),
                ("Laundry/Cleaning", ["dynamic balance", "load management", "problem solving"]),
            ]),
            _phase("community", "Community Reinteg", [
                ("Money Management", ["higher-level calculation", "executive function"]),
                ("Medication Box Setup", ["fine motor coordination", "cognitive retention"]),
            ]),
        ],
    ),
    "VISION": ClinicalActivity(
        id="VISION",
        label="Vision/Perception (97530)",
        billing_code="97530",
        phases=[
            _phase("oculomotor", "Oculomotor Skills", [
                ("Saccades/Pursuits", ["visual tracking", "oculomotor fatigue"]),
                ("Convergence/Divergence", ["diplopia", "visual fusion"]),
            ]),
            _phase("perception", "Visual Perception", [
                ("Figure-Ground tasks", ["visual discrimination", "visual clutter processing", "atmospheric/environmental barriers"]),
                ("Visual Scanning", ["unilateral neglect", "visual field cut", "atmospheric/environmental barriers"]),
            ]),
        ],
    ),
    "MANUAL": ClinicalActivity(
        id="MANUAL",
        label="Manual Therapy (97140)",
        billing_code="97140",
        phases=[
            _phase("soft_tissue", "Soft Tissue Mob", [
                ("Myofascial release", ["tissue extensibility", "muscle guarding", "fascial restriction"]),
                ("Trigger point release", ["pain modulation", "muscle guarding"]),
                ("Retrograde massage", ["edema management", "lymphatic flow"]),
            ]),
            _phase("joint", "Joint Mobilization", [
                ("Glenohumeral distraction", ["capsular restriction", "pain modulation"]),
                ("Scapular mobilization", ["scapulohumeral rhythm", "soft tissue extensibility"]),
            ]),
        ],
    ),
    "COGNITIVE": ClinicalActivity(
        id="COGNITIVE",
        label="Cognitive Skills (97127)",
        billing_code="97127",
        phases=[
            _phase("attention", "Attention & Focus", [
                ("Dual-task training", ["divided attention", "cognitive endurance"]),
                ("Sustained attention task", ["attentional capacity", "task persistence"]),
            ]),
            _phase("executive", "Executive Function", [
                ("Medication management", ["complex sequencing", "safety awareness", "problem solving"]),
                ("Schedule planning", ["abstract reasoning", "time management"]),
                ("Financial balancing", ["higher-level calculation", "problem solving"]),
            ]),
        ],
    ),
    "WHEELCHAIR": ClinicalActivity(
        id="WHEELCHAIR",
        label="Wheelchair Mgmt (97542)",
        billing_code="97542",
        phases=[
            _phase("propulsion", "Propulsion Training", [
                ("Level terrain propulsion", ["muscular endurance", "scapular stability"]),
                ("Ramp negotiation", ["safety awareness", "trunk control"]),
                ("Doorway management", ["visual-spatial processing", "maneuverability"]),
            ]),
            _phase("positioning", "Positioning & Fit", [
                ("Pressure relief techniques", ["skin integrity risk", "motor planning"]),
                ("Cushion adjustment", ["postural alignment", "sitting balance"]),
                ("Rigging management", ["fine motor coordination", "sequencing"]),
            ]),
        ],
    ),
    "GAIT": ClinicalActivity(
        id="GAIT",
        label="Gait Training (97116)",
        billing_code="97116",
        phases=[
            _phase("mechanics", "Gait Mechanics", [
                ("Weight acceptance training", ["antalgic pattern", "decreased stance time"]),
                ("Swing phase initiation", ["hip flexor weakness", "foot clearance deficit"]),
            ]),
            _phase("functional_amb", "Functional Ambulation", [
                ("Multi-directional turns", ["dynamic instability", "vestibular dysfunction"]),
                ("Uneven surface negotiation", ["proprioceptive deficit", "balance confidence"]),
            ]),
        ],
    ),
    "ORTHOTICS": ClinicalActivity(
        id="ORTHOTICS",
        label="Orthotics (97760)",
        billing_code="97760",
        phases=[
            _phase("assessment", "Assessment & Fit", [
                ("Skin integrity inspection", ["risk of breakdown", "sensation impairment"]),
                ("Joint alignment check", ["contracture risk", "joint deformity"]),
            ]),
            _phase("training", "Usage Training", [
                ("Donning/Doffing technique", ["fine motor deficit", "sequencing"]),
                ("Wear schedule education", ["cognitive retention", "insight into condition"]),
            ]),
        ],
    ),
    "SENSORY": ClinicalActivity(
        id="SENSORY",
        label="Sensory Integ. (97533)",
        billing_code="97533",
        phases=[
            _phase("desensitization", "Desensitization", [
                ("Graded texture exposure", ["hypersensitivity", "allodynia", "atmospheric/environmental barriers"]),
                ("Vibration/Percussion", ["neuroma pain", "sensory organization"]),
            ]),
            _phase("discrimination", "Discrimination", [
                ("Stereognosis tasks", ["cortical sensory loss", "tactile agnosia"]),
                ("Localization training", ["peripheral neuropathy", "sensory mapping deficit"]),
            ]),
        ],
    ),
}

# Hidden from the picker unless explicitly requested
HIDDEN_ACTIVITY_IDS: frozenset[str] = frozenset(
    {"COGNITIVE", "VISION", "IADL", "BALANCE", "SENSORY", "GAIT"}
)

# Codes whose units capture free-text params (sets/reps)
PARAMS_BILLING_CODES: frozenset[str] = frozenset({"97110"})


def visible_activities(include_hidden: bool = False) -> list[ClinicalActivity]:
    """Activities offered by the picker, in table order."""
    return [
        activity
        for activity_id, activity in CLINICAL_ACTIVITIES.items()
        if include_hidden or activity_id not in HIDDEN_ACTIVITY_IDS
    ]


def get_activity(activity_id: str) -> ClinicalActivity | None:
    """Look up an activity by id (case-insensitive)."""
    return CLINICAL_ACTIVITIES.get(activity_id.upper())
