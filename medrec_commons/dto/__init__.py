from .patient_meta import (
    CamelModel,
    Imaging,
    Injection,
    Lab,
    LabsImagingsProcedures,
    Med,
    MedicalHistory,
    MedicalProblem,
    MedsSupplements,
    PatientMetaRequest,
    Procedure,
    SocialHistory,
    Supplement,
    SurgicalProcedure,
    Vaccine,
    VaccinesInjections,
    Vitals,
)

__all__ = [
    "CamelModel",
    "Imaging",
    "Injection",
    "Lab",
    "LabsImagingsProcedures",
    "Med",
    "MedicalHistory",
    "MedicalProblem",
    "MedsSupplements",
    "PatientMetaRequest",
    "Procedure",
    "SocialHistory",
    "Supplement",
    "SurgicalProcedure",
    "Vaccine",
    "VaccinesInjections",
    "Vitals",
]
