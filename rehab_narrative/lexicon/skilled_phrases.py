"""Deficit phrase dictionary.

Maps the short deficit keys offered by the picker to full clinical phrases
that document the skilled need. Keys not listed here (custom deficits typed
by the therapist) pass through verbatim.
"""

SKILLED_PHRASES: dict[str, str] = {
    # Functional mobility
    "dynamic balance": "impaired dynamic balance during multi-directional movement",
    "functional reach": "decreased functional reach outside base of support",
    "visual-spatial processing": "deficits in visual-spatial processing",
    "hip flexion ROM": "restricted hip flexion ROM limiting lower extremity access",
    "static postural stability": "decreased static postural stability requiring external support",
    "bilateral coordination": "impaired bilateral upper extremity coordination",
    "safety awareness": "inconsistent safety awareness regarding fall risks",
    "motor planning": "impaired motor planning (praxis) for sequencing movements",
    "eccentric control": "poor eccentric control during antigravity descent",
    "core stability": "insufficient core stability to maintain midline",
    "motor unit recruitment": "inefficient motor unit recruitment in target musculature",
    "length-tension relationship": "suboptimal length-tension relationships",
    "capsular restriction": "capsular restriction limiting physiological range",
    "proprioception": "impaired proprioceptive feedback for joint positioning",
    "reactive postural control": "delayed reactive postural control strategies",
    "standing endurance": "decreased standing endurance affecting activity tolerance",
    "sequencing": "deficits in cognitive sequencing of multi-step tasks",
    "dynamic sitting balance": "impaired dynamic sitting balance",
    "fine motor coordination": "decreased fine motor coordination/dexterity",
    "tactile discrimination": "impaired tactile discrimination",
    "environmental sequencing": "difficulty sequencing environmental barriers",
    "gluteal activation": "delayed gluteal activation",
    "righting reactions": "delayed righting reactions",
    "grip strength": "decreased grip strength",
    "reciprocal patterning": "loss of reciprocal gait patterning",
    "concentric control": "decreased concentric control against gravity",
    "muscle guarding": "protective muscle guarding limiting active motion",
    "muscular endurance": "decreased local muscular endurance",
    "soft tissue extensibility": "restricted soft tissue extensibility",
    "joint arthrokinematics": "altered joint arthrokinematics",
    "pain modulation": "need for pain modulation techniques",
    "vestibular processing": "impaired vestibular processing",
    "ankle stability": "decreased ankle stability strategies",
    "bilateral integration": "difficulty crossing midline and bilateral integration",
    "kinesthetic awareness": "decreased kinesthetic awareness of limb position",
    "movement fluidity": "segmented movement patterns lacking fluidity",

    # Activity tolerance and strength
    "decreased activity tolerance": "notable decrease in activity tolerance evidenced by increased respiratory rate and fatigue",
    "decreased upper extremity strength": "decreased upper extremity strength limiting functional participation",
    "atmospheric/environmental barriers": "environmental/atmospheric barriers affecting sensory processing",
    "contracture risk": "risk of soft tissue contracture requires skilled positioning",
    "load management": "unsafe mechanics during load management",

    # Manual Therapy
    "fascial restriction": "myofascial restrictions limiting tissue mobility",
    "edema management": "distal edema limiting range of motion",
    "lymphatic flow": "impaired lymphatic return",
    "scapulohumeral rhythm": "altered scapulohumeral rhythm",

    # Cognitive
    "divided attention": "impaired divided attention during safety monitoring",
    "cognitive endurance": "decreased cognitive endurance for sustained tasks",
    "attentional capacity": "decreased attentional capacity affecting task persistence",
    "task persistence": "inability to persist in goal-directed activity",
    "complex sequencing": "deficits in complex sequencing of IADLs",
    "abstract reasoning": "impaired abstract reasoning for problem solving",
    "time management": "deficits in time management and estimation",
    "higher-level calculation": "acalculia affecting financial management",

    # Wheelchair
    "scapular stability": "decreased scapular stability for propulsion efficiency",
    "trunk control": "impaired trunk control during dynamic weight shifts",
    "maneuverability": "difficulty maneuvering device in tight spaces",
    "skin integrity risk": "high risk for skin breakdown requiring pressure relief training",
    "postural alignment": "asymmetrical postural alignment requiring correction",
    "sitting balance": "impaired static sitting balance in wheelchair",

    # Gait
    "antalgic pattern": "antalgic gait pattern secondary to pain",
    "decreased stance time": "decreased stance time on affected limb",
    "hip flexor weakness": "hip flexor weakness impacting swing phase initiation",
    "foot clearance deficit": "impaired foot clearance increasing trip risk",
    "dynamic instability": "dynamic instability during turns",
    "vestibular dysfunction": "vestibular dysfunction affecting gaze stabilization",
    "balance confidence": "reduced balance confidence on uneven surfaces",

    # Orthotics
    "risk of breakdown": "high risk for skin breakdown at pressure points",
    "sensation impairment": "impaired protective sensation",

    "joint deformity": "progressing joint deformity requiring support",
    "fine motor deficit": "fine motor deficits limiting independent doffing",
    "cognitive retention": "deficits in cognitive retention of wear schedule",
    "insight into condition": "limited insight into need for device usage",

    # Sensory
    "hypersensitivity": "tactile hypersensitivity limiting functional use",
    "allodynia": "allodynia affecting ADL participation",
    "neuroma pain": "neuroma-related pain requiring desensitization",
    "sensory organization": "disordered sensory organization",
    "cortical sensory loss": "cortical sensory loss affecting object recognition",
    "tactile agnosia": "tactile agnosia (astereognosis)",
    "peripheral neuropathy": "distal peripheral neuropathy",
    "sensory mapping deficit": "impaired somatosensory mapping",

    # Balance, IADL and vision
    "somatosensory integration": "poor somatosensory integration for balance",
    "base of support management": "inability to maintain balance within narrowed base of support",
    "center of gravity control": "loss of center of gravity control at limits of stability",
    "ankle strategies": "absence of effective ankle strategies for balance recovery",
    "gaze stabilization": "impaired gaze stabilization (VOR) during head movement",
    "oscillopsia": "reports of oscillopsia interfering with function",
    "visual-vestibular mismatch": "visual-vestibular mismatch causing dizziness",
    "dizziness handicap": "significant functional limitations due to dizziness",
    "task sequencing": "inability to sequence multi-step meal preparation",
    "functional endurance": "decreased functional endurance for home management tasks",

    "problem solving": "deficits in problem solving during novel tasks",
    "visual tracking": "impaired smooth pursuits and visual tracking",
    "oculomotor fatigue": "rapid onset of oculomotor fatigue",
    "diplopia": "diplopia affecting depth perception",
    "visual fusion": "impaired visual fusion and binocular integration",
    "visual discrimination": "difficulty with visual discrimination of objects",
    "visual clutter processing": "inability to process information in visual clutter",
    "unilateral neglect": "unilateral spatial neglect affecting safety",
    "visual field cut": "compensatory deficits related to visual field cut",

    # ADL and therapeutic activity
    "hand-to-mouth coordination": "deficient hand-to-mouth coordination for self-feeding",
    "crossing midline": "inability to cross midline during ADLs",
    "shoulder ROM": "limited shoulder range of motion affecting reach",
    "visual-motor integration": "impaired visual-motor integration",
    "tripod grasp": "immature or weak tripod grasp",
    "forearm supination": "limited forearm supination for utensil use",
    "grading force": "difficulty grading force modulation",
    "wrist stability": "decreased wrist stability during load",
    "trunk rotation": "limited trunk rotation limiting reach",
    "standing tolerance": "decreased standing tolerance during ADL tasks",
    "pincer grasp": "impaired pincer grasp for small items",
    "finger isolation": "poor finger isolation",
    "in-hand manipulation": "difficulty with in-hand manipulation (translation/rotation)",
    "scapular endurance": "decreased scapular endurance during sustained reach",
    "visual scanning": "impaired visual scanning of environment",
}
