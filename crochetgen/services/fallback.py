"""
Fallback patterns, served when no provider returns usable text.

One hand-written template per skill level, keyed by SkillLevel. Beginner
sticks to ch/sc/hdc/dc/sl st; intermediate adds tr, decreases and shells;
advanced brings in post stitches, popcorns, puffs and bobbles.
"""
from __future__ import annotations

from ..models.requests import PatternRequest, SkillLevel

DEFAULT_SIZE = "Adjust to desired size"
DEFAULT_YARN = "Worsted"

BEGINNER_TEMPLATE = """{title} PATTERN

SKILL LEVEL: Beginner

MATERIALS:
- {yarn_weight} weight yarn (amount varies by size)
- Hook size recommended on your yarn label
- Scissors
- Yarn/tapestry needle for sewing
- Stitch markers (optional)

FINISHED SIZE: {size}

GAUGE:
Work a 4" x 4" gauge swatch to determine your personal tension and adjust hook size as needed.

ABBREVIATIONS:
- ch = chain
- sc = single crochet
- hdc = half double crochet
- dc = double crochet
- sl st = slip stitch
- st(s) = stitch(es)
- rep = repeat

SPECIAL NOTES:
This is a beginner level pattern. {description}

INSTRUCTIONS:

Foundation:
Ch 25 (or desired width + 1 for turning chain)

Row 1: Sc in 2nd ch from hook and in each ch across. Turn. (24 sc)

Row 2: Ch 1, sc in each st across. Turn. (24 sc)

Row 3: Ch 2 (does not count as st), hdc in each st across. Turn. (24 hdc)

Rows 4-5: Rep Row 2.

Repeat Rows 2-5 until piece measures desired length.

Border (optional):
Work 1 round of sc evenly around entire piece, working 3 sc in each corner. Sl st to first sc to join.

FINISHING:
- Weave in all loose ends
- Block to measurements if needed
- Steam lightly if yarn care allows

CUSTOMIZATION TIPS:
- Adjust foundation chain length for different widths
- Change yarn weight and hook size for different textures
- Add color changes at the start of any row

Created with love for your crafting journey!"""

INTERMEDIATE_TEMPLATE = """{title} PATTERN

SKILL LEVEL: Intermediate

MATERIALS:
- {yarn_weight} weight yarn in a main color (MC) and a contrast color (CC)
- Hook one size larger than recommended on your yarn label
- Yarn/tapestry needle
- Stitch markers

FINISHED SIZE: {size}

GAUGE:
16 dc x 9 rows = 4" x 4" (10 cm x 10 cm). Take the time to check your gauge.

ABBREVIATIONS:
- ch = chain
- sc = single crochet
- dc = double crochet
- tr = treble crochet
- sl st = slip stitch
- sc2tog = single crochet 2 together
- dc2tog = double crochet 2 together
- sp = space
- shell = 5 dc in same st

SPECIAL NOTES:
This is an intermediate level pattern worked in a shell stitch repeat. {description}

INSTRUCTIONS:

Foundation:
With MC, ch 38 (multiple of 6 + 2).

Row 1: Sc in 2nd ch from hook, *sk 2 ch, shell in next ch, sk 2 ch, sc in next ch; rep from * across. Turn. (6 shells)

Row 2: Ch 4 (counts as tr), 2 tr in first sc, *sc in 3rd dc of next shell, 5 tr in next sc; rep from * across, ending 3 tr in last sc. Turn.

Row 3: Ch 1, sc in first st, *shell in next sc, sc in 3rd tr of next 5-tr group; rep from * across. Turn.

Row 4: With CC, ch 3, dc2tog over next 2 sts, dc in each st across to last 3 sts, dc2tog, dc in last st. Turn.

Row 5: Ch 1, sc2tog, sc in each st across to last 2 sts, sc2tog. Turn.

Row 6: With MC, ch 1, 2 sc in first st, sc in each st across, 2 sc in last st. Turn.

Repeat Rows 1-6 until piece measures desired length, ending after a Row 3.

Edging:
Ch 1, work sc evenly around, working 3 sc in each corner. Join with sl st. Fasten off.

FINISHING:
- Weave in ends along color changes
- Wet block, pinning each shell point open
- Allow to dry completely before unpinning"""

ADVANCED_TEMPLATE = """{title} PATTERN

SKILL LEVEL: Advanced

MATERIALS:
- {yarn_weight} weight yarn, about 20% more than a plain-stitch project of the same size
- Hook recommended on your yarn label, plus one size smaller for ribbing
- Cable needle not required; all texture is worked with post stitches
- Yarn/tapestry needle
- Locking stitch markers

FINISHED SIZE: {size}

GAUGE:
18 sts x 12 rows = 4" x 4" (10 cm x 10 cm) in textured pattern, blocked.

ABBREVIATIONS:
- ch = chain
- sc = single crochet
- dc = double crochet
- sl st = slip stitch
- FPdc = front post double crochet
- BPdc = back post double crochet
- FPtr = front post treble crochet
- popcorn = 5 dc in same st, drop loop, insert hook in first dc, pick up dropped loop and draw through
- puff stitch = (yo, insert hook, yo, pull up loop) 4 times in same st, yo and draw through all 9 loops
- bobble = 5 dc2tog worked in same st, yo and draw through all 6 loops

SPECIAL NOTES:
This is an advanced level pattern combining post-stitch cables with popcorn, puff stitch and bobble texture. Read each row through before working it. {description}

INSTRUCTIONS:

Ribbing:
With smaller hook, ch 52.
Row 1: Dc in 4th ch from hook and in each ch across. Turn. (50 sts)
Rows 2-4: Ch 2, *FPdc around next st, BPdc around next st; rep from * across, dc in top of turning ch. Turn.

Body (change to larger hook):
Row 5: Ch 1, sc in each st across. Turn. (50 sc)
Row 6 (RS): Ch 2, dc in next 3 sts, *FPtr around next 2 sts 2 rows below, dc in next 2 sts, popcorn in next st, dc in next 2 sts, FPtr around next 2 sts 2 rows below, dc in next 3 sts; rep from * across. Turn.
Row 7: Ch 1, sc in each st across, working sc in top of each popcorn. Turn.
Row 8: Ch 2, dc in next 3 sts, *skip next 2 FPtr, FPtr around following 2 FPtr, working in front of these, FPtr around skipped FPtr, dc in next 2 sts, puff stitch in next st, dc in next 2 sts, FPtr around next 2 sts, dc in next 3 sts; rep from * across. Turn.
Row 9: Rep Row 7.
Row 10: Ch 2, dc in next 3 sts, *FPtr around next 2 sts, dc in next 2 sts, bobble in next st, dc in next 2 sts, FPtr around next 2 sts, dc in next 3 sts; rep from * across. Turn.
Row 11: Rep Row 7.
Row 12: Rep Row 8, working popcorn in place of puff stitch.

Repeat Rows 5-12 (8-row repeat) until piece measures 3" less than desired length.

Top Ribbing:
With smaller hook, rep Rows 2-4.

FINISHING:
- Weave in ends on the wrong side, splitting plies to secure
- Steam block gently; do not flatten popcorns, puffs or bobbles
- Seam pieces with mattress stitch if the project has more than one panel"""

FALLBACK_TEMPLATES: dict[SkillLevel, str] = {
    SkillLevel.BEGINNER: BEGINNER_TEMPLATE,
    SkillLevel.INTERMEDIATE: INTERMEDIATE_TEMPLATE,
    SkillLevel.ADVANCED: ADVANCED_TEMPLATE,
}

GENERIC_FALLBACK = """BASIC CROCHET PATTERN

This pattern was generated as a fallback due to a technical issue.

MATERIALS:
- Worsted weight yarn
- Size H/8 (5.0mm) crochet hook
- Scissors
- Yarn needle

BASIC INSTRUCTIONS:
Foundation: Chain 20
Row 1: Single crochet in 2nd chain from hook and each chain across. Turn.
Row 2: Chain 1, single crochet in each stitch across. Turn.
Repeat Row 2 until desired length.

FINISHING:
Weave in ends and enjoy your handmade creation!

Note: For more detailed patterns, please try again or contact support."""


def fallback_pattern(req: PatternRequest) -> str:
    """Fill the template for the request's skill level."""
    template = FALLBACK_TEMPLATES[req.skill_level]
    return template.format(
        title=req.project_type.upper(),
        yarn_weight=(req.yarn_weight or DEFAULT_YARN).capitalize(),
        size=req.size or DEFAULT_SIZE,
        description=req.description,
    )
