class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    LANG_SELECT = "ui.lang_select"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    LANG = "lang"
    STORE = "hirelink.candidate_store"
    WIZARD = "hirelink.application_wizard"
    JOBS = "hirelink.job_catalog"
    SELECTED_JOB_ID = "hirelink.selected_job_id"
    STORE_SNAPSHOT = "hirelink.store_snapshot"
    WIZARD_SNAPSHOT = "hirelink.wizard_snapshot"
    SESSION_ID = "hirelink.session_id"
