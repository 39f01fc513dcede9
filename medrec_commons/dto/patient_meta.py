"""Request shapes for a patient's clinical metadata.

Every field is optional and no model checks one field against another.
JSON uses camelCase keys; Python attributes are snake_case.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Vaccine(CamelModel):
    ordered_by: Optional[str] = None
    administered_by: Optional[str] = None
    administered_time: Optional[str] = None
    administered_date: Optional[str] = None
    facility: Optional[str] = None
    route: Optional[str] = None
    site: Optional[str] = None
    dose: Optional[str] = None
    units: Optional[str] = None
    vaccine_number: Optional[str] = None
    total_vaccines: Optional[str] = None
    vfc_class: Optional[str] = None
    vis_provided: Optional[str] = None
    funding: Optional[str] = None
    success_flag: Optional[bool] = None
    vaccine_info: Optional[str] = None
    vaccine_name: Optional[str] = None
    ndc: Optional[str] = None
    cvx: Optional[str] = None
    vaccine_info_flag: Optional[str] = None
    source: Optional[str] = None
    refusal_reason: Optional[str] = None
    refusal_note: Optional[str] = None


class Injection(CamelModel):
    ordered_by: Optional[str] = None
    administered_by: Optional[str] = None
    time: Optional[str] = None
    administered_on: Optional[str] = None
    expiration_date: Optional[str] = None
    location: Optional[str] = None
    route: Optional[str] = None
    site: Optional[str] = None
    dose: Optional[str] = None
    dose_units: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    duration_units: Optional[str] = None
    notes: Optional[str] = None
    injection_info_flag: Optional[str] = None
    injection_name: Optional[str] = None


class VaccinesInjections(CamelModel):
    vaccines: Optional[List[Vaccine]] = None
    injections: Optional[List[Injection]] = None


class Med(CamelModel):
    direction: Optional[str] = None
    quantity: Optional[str] = None
    when_string: Optional[str] = None
    dispense: Optional[str] = None
    frequency: Optional[str] = None
    duration: Optional[str] = None
    earliest_fill_date: Optional[str] = None
    additional_refills: Optional[str] = None
    active_flag: Optional[bool] = None
    drug_name: Optional[str] = None


class Supplement(Med):
    pass


class MedsSupplements(CamelModel):
    meds: Optional[List[Med]] = None
    supplements: Optional[List[Supplement]] = None


class Lab(CamelModel):
    lab_name: Optional[str] = None
    sent_to: Optional[str] = None
    expiration_date: Optional[str] = None
    created_date: Optional[str] = None
    note_for_lab: Optional[str] = None
    note_for_admin: Optional[str] = None
    status: Optional[str] = None
    interpretation: Optional[str] = None
    comment: Optional[str] = None


class Imaging(CamelModel):
    imaging_name: Optional[str] = None
    sent_to: Optional[str] = None
    expected_date: Optional[str] = None
    expiration_date: Optional[str] = None
    criticality: Optional[str] = None
    priority: Optional[str] = None
    order_status: Optional[str] = None
    reason_for_order: Optional[str] = None
    instructions_for_lab: Optional[str] = None
    note_for_lab: Optional[str] = None


class Procedure(CamelModel):
    procedure_name: Optional[str] = None
    procedure_date: Optional[str] = None
    expiration_date: Optional[str] = None
    dx_code: Optional[str] = None
    order_status: Optional[str] = None
    note: Optional[str] = None
    source_of_service: Optional[str] = None


class LabsImagingsProcedures(CamelModel):
    labs: Optional[List[Lab]] = None
    imagings: Optional[List[Imaging]] = None
    procedures: Optional[List[Procedure]] = None


class Vitals(CamelModel):
    patient_id: Optional[int] = None
    assessment_date: Optional[str] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    bmi: Optional[float] = None
    blood_pressure: Optional[float] = None
    pulse_rate: Optional[float] = None
    o2_saturation: Optional[float] = None
    temperature: Optional[float] = None
    respiration_rate: Optional[float] = None


class SocialHistory(CamelModel):
    # Tobacco
    tobacco_sachets: Optional[str] = None
    consumes_per: Optional[str] = None

    # Smoking
    packs: Optional[str] = None
    smokes_per: Optional[str] = None

    # Alcohol
    alcohol_type: Optional[str] = None
    alcohol_quantity: Optional[int] = None
    alcohol_per: Optional[str] = None

    # Exercise
    exercise_type: Optional[str] = None
    exercise_times: Optional[int] = None
    exercise_per: Optional[str] = None

    # Recreational drug use
    drug_type: Optional[str] = None
    drug_quantity: Optional[int] = None
    drug_per: Optional[str] = None


class MedicalProblem(CamelModel):
    icd_code: Optional[str] = None
    date: Optional[str] = None
    active: Optional[bool] = None


class SurgicalProcedure(MedicalProblem):
    pass


class MedicalHistory(CamelModel):
    social_history: Optional[SocialHistory] = None
    medical_history: Optional[List[MedicalProblem]] = None
    surgical_history: Optional[List[SurgicalProcedure]] = None


class PatientMetaRequest(CamelModel):
    allergies: Optional[List[str]] = None
    vaccines_injections: Optional[VaccinesInjections] = None
    meds_supplements: Optional[MedsSupplements] = None
    labs_imagings_procedures: Optional[LabsImagingsProcedures] = None
    vitals: Optional[List[Vitals]] = None
    medical_history: Optional[MedicalHistory] = None
