import streamlit as st

from ecgbill.api import (
    API,
    AddBand,
    BillingMode,
    BillingRequest,
    CustomerClass,
    RemoveBand,
    ResetBands,
    UpdateBand,
)
from ecgbill.errors import BillingError
from ecgbill.services.bill_report import breakdown_frame, summary, tariff_frame
from ecgbill.strategies.policies import POLICIES
from ecgbill.utils.logger import get_logger

logger = get_logger(__name__)

CLASS_LABELS = {
    CustomerClass.RESIDENTIAL: "Residential",
    CustomerClass.NON_RESIDENTIAL: "Non-Residential",
}

FORM_DEFAULTS = {
    "previous_reading": 0.0,
    "current_reading": 0.0,
    "period_days": 31,
    "prior_balance": 0.0,
    "payments_received": 0.0,
    "manual_adjustment": 0.0,
}


# ==========================================
# 1. DATA MANAGER (session state)
# ==========================================
class DataManager:
    @staticmethod
    def init():
        if 'policy' not in st.session_state:
            st.session_state.policy = API.get_policy().name
        if 'schedule' not in st.session_state:
            st.session_state.schedule = API.default_schedule(st.session_state.policy)
        # bumped whenever bands shift, so editor widgets never inherit a neighbour's value
        if 'revision' not in st.session_state:
            st.session_state.revision = 0
        if 'saved' not in st.session_state:
            st.session_state.saved = None
        if 'result' not in st.session_state:
            st.session_state.result = None

        saved = st.session_state.saved
        for key, value in FORM_DEFAULTS.items():
            if key == "manual_adjustment" and saved:
                value = saved["adjustment"]
            st.session_state.setdefault(key, value)
        st.session_state.setdefault("customer_class", CustomerClass.RESIDENTIAL)

    @staticmethod
    def edit(operation):
        st.session_state.schedule = API.apply_edit(st.session_state.schedule, operation)
        if not isinstance(operation, UpdateBand):
            st.session_state.revision += 1

    @staticmethod
    def edit_from_widget(customer_class, index, name, key):
        DataManager.edit(UpdateBand(customer_class, index, {name: st.session_state[key]}))

    @staticmethod
    def switch_policy(name):
        st.session_state.policy = name
        st.session_state.schedule = API.default_schedule(name)
        st.session_state.revision += 1
        st.session_state.result = None

    @staticmethod
    def remember(previous, current, adjustment):
        st.session_state.saved = {"previous": previous, "current": current, "adjustment": adjustment}

    @staticmethod
    def use_reading(value):
        st.session_state.previous_reading = value

    @staticmethod
    def clear():
        for key, value in FORM_DEFAULTS.items():
            st.session_state[key] = value
        st.session_state.result = None


# ==========================================
# 2. STREAMLIT UI
# ==========================================

st.set_page_config(page_title="ECG Bill Calculator", layout="wide", page_icon="⚡")
DataManager.init()

st.title("⚡ ECG Bill Calculator")
st.info("This calculator is for ECG postpaid bills only. It does not apply to prepaid meters.")

# Sidebar
st.sidebar.header("Tariff")
policy_names = sorted(POLICIES)
policy = st.sidebar.selectbox(
    "Tariff policy", policy_names, index=policy_names.index(st.session_state.policy)
)
if policy != st.session_state.policy:
    DataManager.switch_policy(policy)

tabs = st.tabs(["🧮 Calculator", "📈 Tariff Rates"])

# --- TAB 1: CALCULATOR ---
with tabs[0]:
    inputs, results = st.columns(2)

    with inputs:
        st.header("Inputs")
        quick = st.toggle(
            "Quick Mode", value=True, key="quick_mode",
            help="Previous and current kWh only (31 days, no arrears)",
        )
        remember = st.toggle("Remember readings", value=True, key="remember")

        c1, c2 = st.columns(2)
        prev_read = c1.number_input("Previous Reading (kWh)", key="previous_reading")
        curr_read = c2.number_input("Current Reading (kWh)", key="current_reading")

        saved = st.session_state.saved
        if prev_read == 0 and saved:
            c1.button(
                f"Use saved: {saved['previous']:g}",
                on_click=DataManager.use_reading, args=(saved["previous"],),
            )
            c1.button(
                f"Use last current: {saved['current']:g}",
                on_click=DataManager.use_reading, args=(saved["current"],),
            )

        customer_class = st.selectbox(
            "Tariff Type", list(CLASS_LABELS), format_func=CLASS_LABELS.get, key="customer_class"
        )

        form = {
            "previous_reading": prev_read,
            "current_reading": curr_read,
            "customer_class": customer_class,
            "mode": BillingMode.QUICK if quick else BillingMode.DETAILED,
        }
        if not quick:
            d1, d2 = st.columns(2)
            form["period_days"] = d1.number_input("Billing Days", min_value=1, step=1, key="period_days")
            form["prior_balance"] = d2.number_input("Previous Balance (GHS)", key="prior_balance")
            form["payments_received"] = d1.number_input("Payments Made (GHS)", key="payments_received")
            form["manual_adjustment"] = d2.number_input(
                "Adjustments (GHS)", key="manual_adjustment",
                help="Positive for surcharge, negative for credit.",
            )

        a1, a2 = st.columns(2)
        if a1.button("Calculate Bill", type="primary"):
            try:
                request = BillingRequest.from_dict(form)
                st.session_state.result = API.compute_bill(
                    st.session_state.schedule, request, st.session_state.policy
                )
                if remember:
                    DataManager.remember(prev_read, curr_read, st.session_state.manual_adjustment)
            except BillingError as e:
                logger.warning(f"Rejected bill request: {e}")
                st.error(str(e))
        a2.button("Clear", on_click=DataManager.clear)

    with results:
        st.header("Results")
        result = st.session_state.result
        if result is None:
            st.caption("Enter values and click Calculate.")
        else:
            lines = summary(result)
            m1, m2, m3, m4 = st.columns(4)
            m1.metric("Units", f"{lines['Units (kWh)']} kWh")
            m2.metric("Energy Cost", f"GHS {lines['Energy Cost']}")
            m3.metric("Service Charge", f"GHS {lines['Service Charge']}")
            m4.metric("Total Bill", f"GHS {lines['Total Bill']}")

            for label, value in lines.items():
                if label in ("Units (kWh)", "Energy Cost", "Service Charge", "Total Bill", "Final Amount Payable"):
                    continue
                st.markdown(f"{label}: **GHS {value}**")

            st.success(f"Final Amount Payable: GHS {lines['Final Amount Payable']}")
            st.subheader("Band Breakdown")
            st.dataframe(breakdown_frame(result), hide_index=True, width="stretch")

# --- TAB 2: RATE EDITOR ---
with tabs[1]:
    st.header("Tariff Rates")
    editing = st.selectbox("Editing", list(CLASS_LABELS), format_func=CLASS_LABELS.get, key="editing")

    b1, b2 = st.columns(2)
    b1.button("Add band", on_click=DataManager.edit, args=(AddBand(editing),))
    b2.button("Reset", on_click=DataManager.edit, args=(ResetBands(),))

    rev = st.session_state.revision
    bands = st.session_state.schedule.bands(editing)
    for i, band in enumerate(bands):
        c1, c2, c3 = st.columns([4, 4, 2])
        limit_key = f"limit-{rev}-{editing.value}-{i}"
        rate_key = f"rate-{rev}-{editing.value}-{i}"
        if band.unbounded:
            c1.text_input("Limit (kWh)", value="∞", disabled=True, key=limit_key)
        else:
            c1.number_input(
                "Limit (kWh)", value=float(band.limit), min_value=0.0, key=limit_key,
                on_change=DataManager.edit_from_widget, args=(editing, i, "limit", limit_key),
            )
        c2.number_input(
            "Rate (GHS/kWh)", value=float(band.rate), step=0.0001, format="%.4f", key=rate_key,
            on_change=DataManager.edit_from_widget, args=(editing, i, "rate", rate_key),
        )
        c3.button(
            "Remove", disabled=band.unbounded, key=f"remove-{rev}-{editing.value}-{i}",
            on_click=DataManager.edit, args=(RemoveBand(editing, i),),
        )

    st.dataframe(tariff_frame(st.session_state.schedule, editing), hide_index=True, width="stretch")
