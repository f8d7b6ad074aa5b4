EXAM_RESULTS_SYSTEM_PROMPT = """
You extract laboratory exam results from unstructured clinical text and rewrite them as a compact, abbreviated summary.
Reply with a single JSON object of the form {"resultsString": "<summary>"} and nothing else.
"""

EXAM_RESULTS_PROMPT_TEMPLATE = """
Read the text below and extract ONLY the laboratory exam results it contains.
The text may come from a lab report, a referral letter or a copied chart section and often mixes
results with administrative content. Ignore everything that is not an exam result.

# OUTPUT FORMAT:
- Each result is written as "abbreviation: value"
- Results are joined by " | " (space, pipe, space)
- Never start or end the string with a separator and never repeat a separator
- Keep the order in which the exams appear in the text
- If no valid exam result is identified, resultsString must be an empty string ""
- Return ONLY the JSON object {{"resultsString": "..."}}, without comments or markdown

# EXAM NAME ABBREVIATION:
Use the short name a clinician would write on a chart. Reference table:
- Hemoglobin -> Hb
- Hematocrit -> Ht
- Leukocytes / White blood cells -> Leuco
- Neutrophils -> Neut
- Segmented neutrophils -> Seg
- Band neutrophils -> Bast
- Lymphocytes -> Linf
- Monocytes -> Mono
- Eosinophils -> Eos
- Basophils -> Baso
- Platelets -> Plaq
- Creatinine -> Cr
- Urea -> Ur
- Sodium -> Na
- Potassium -> K
- Magnesium -> Mg
- Ionized calcium -> CaI
- Phosphorus -> P
- C-reactive protein -> PCR
- Aspartate aminotransferase (AST / TGO) -> TGO
- Alanine aminotransferase (ALT / TGP) -> TGP
- Gamma-glutamyl transferase -> GGT
- Alkaline phosphatase -> FA
- Total bilirubin -> BT
- Direct bilirubin -> BD
- Indirect bilirubin -> BI
- Albumin -> Alb
- Glucose / Blood glucose -> Gli
- Glycated hemoglobin -> HbA1c
- Lactate -> Lac
- Prothrombin time INR -> INR
- Activated partial thromboplastin time -> TTPA
- Thyroid-stimulating hormone -> TSH
- Free thyroxine -> T4L
- Troponin -> Trop
- Procalcitonin -> PCT

When an exam is not in the table:
- Use its usual chemical symbol or widely used acronym when one exists (e.g. "Chloride" -> "Cl")
- Otherwise shorten the name to its first meaningful word, keeping it recognisable
- Never invent an acronym that a clinician would not recognise

# VALUES:
- Copy the value exactly as written, keeping decimal separators and signs (e.g. "<0.5", "1,2")
- Do NOT include units (g/dL, mg/dL, mEq/L, /mm3, U/L, ...)
- Do NOT include reference ranges, normal values, methods or flags (H, L, *, arrows)
- Qualitative results are kept as written (e.g. "Negative", "Reactive")

# DIFFERENTIAL LEUKOCYTE COUNT (EXCEPTION):
- For Neut, Seg, Bast, Linf, Mono, Eos and Baso, when the text shows a percentage, keep the percentage
  WITH the "%" sign (e.g. "Seg: 65%")
- If both a percentage and an absolute count are shown, report only the percentage
- If only an absolute count is shown, report the absolute count without units
- The "%" sign is the only unit-like symbol ever allowed in a value

# EXCLUSIONS:
- Do NOT use generic or placeholder names as keys: "Exam", "Exam 1", "Test", "Result", "Value", "Other", "Item"
- Do NOT use purely numeric names as keys (e.g. "1", "2.3", "001")
- Skip any result whose exam name cannot be identified
- Skip patient names, dates, times, record numbers, addresses, physician names, lab names and signatures
- Skip imaging, pathology and narrative findings that are not laboratory values

# EXAMPLE:
Text:
"Patient: John Doe  DOB 01/02/1960  Hemoglobin 12.5 g/dL (13.0-17.0)  Hematocrit 37%  Leukocytes 8,500 /mm3
Segmented 65% 5,525/mm3  Lymphocytes 25%  Platelets 250,000  Creatinine 1.1 mg/dL  Sodium 138 mEq/L
Exam 1: 4.2"

resultsString:
"Hb: 12.5 | Ht: 37 | Leuco: 8,500 | Seg: 65% | Linf: 25% | Plaq: 250,000 | Cr: 1.1 | Na: 138"

# TEXT:
{text}
"""


def build_exam_results_prompt(text: str) -> str:
    """
    Interpolate the caller's text into the extraction prompt.

    Args:
        text: Raw text supplied by the caller

    Returns:
        The complete user prompt sent to the model
    """
    return EXAM_RESULTS_PROMPT_TEMPLATE.format(text=text)
