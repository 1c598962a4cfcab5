# app.py — Department / risk / value-chain risk assessment form
import logging

import streamlit as st
import pandas as pd
import plotly.graph_objects as go

from risk_assessment_dashboard.catalog import DEPARTMENTS, RISKS, VALUE_CHAIN_STEPS
from risk_assessment_dashboard.db import connect_to_database, create_record, delete_record, list_records
from risk_assessment_dashboard.exceptions import RiskAssessmentError
from risk_assessment_dashboard.helpers import (
    EXPORT_FILE_NAME,
    FREQUENCY_RANGE,
    PROBABILITY_RANGE,
    RISK_DEGREES,
    SEVERITY_RANGE,
    build_matrix,
    classify_risk_degree,
    describe_frequency,
    describe_probability,
    records_to_df,
)
from risk_assessment_dashboard.services.risk_service import assess_risk, export_assessments_bytes

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

st.set_page_config(page_title="Risk Değerlendirme Sistemi", layout="wide")
st.title("🛡️ Risk Değerlendirme Sistemi")

records = connect_to_database(st.session_state)

left, right = st.columns(2)

# -----------------------
# Selections
# -----------------------
with left:
    department = st.selectbox("Departman", DEPARTMENTS, index=None, placeholder="Departman seçin", key="department")
    risk = None
    if department:
        risk = st.selectbox("Risk", RISKS, index=None, placeholder="Risk seçin", key="risk")

with right:
    step = None
    if department and risk:
        step = st.radio("Değer Zinciri", VALUE_CHAIN_STEPS, index=None, key="value_chain_step")

# -----------------------
# Ratings + Calculate
# -----------------------
if department and risk:
    with left:
        st.markdown("## Risk Değerlendirmesi")
        probability = st.number_input(
            "Olasılık (0.1-10)", min_value=PROBABILITY_RANGE[0], max_value=PROBABILITY_RANGE[1],
            value=None, step=0.1, key="probability",
        )
        if probability is not None:
            st.caption(describe_probability(probability))

        frequency = st.number_input(
            "Frekans (0.1-10)", min_value=FREQUENCY_RANGE[0], max_value=FREQUENCY_RANGE[1],
            value=None, step=0.1, key="frequency",
        )
        if frequency is not None:
            st.caption(describe_frequency(frequency))

        severity = st.number_input(
            "Şiddet (0.1-100)", min_value=SEVERITY_RANGE[0], max_value=SEVERITY_RANGE[1],
            value=None, step=0.1, key="severity",
        )

        calc_col, export_col = st.columns(2)
        with calc_col:
            if st.button("Hesapla ve Kaydet", width="stretch"):
                try:
                    record = assess_risk({
                        "department": department,
                        "risk": risk,
                        "value_chain_step": step,
                        "probability": probability,
                        "frequency": frequency,
                        "severity": severity,
                    })
                except RiskAssessmentError as e:
                    st.toast(e.message, icon="⚠️")
                else:
                    create_record(records, record)
                    st.session_state.last_result = (record.risk_score, record.financial_impact)
                    st.toast("Risk değerlendirmesi kaydedildi", icon="✅")

        with export_col:
            if not records:
                if st.button("Excel'e Aktar", width="stretch"):
                    try:
                        export_assessments_bytes(records)
                    except RiskAssessmentError as e:
                        st.toast(e.message, icon="⚠️")
            else:
                st.download_button(
                    "Excel'e Aktar",
                    data=export_assessments_bytes(records),
                    file_name=EXPORT_FILE_NAME,
                    mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                    on_click=lambda: st.toast("Değerlendirmeler Excel dosyası olarak indirildi", icon="📥"),
                    width="stretch",
                )

# -----------------------
# Latest result
# -----------------------
last_result = st.session_state.get("last_result")
if last_result is not None:
    score, impact = last_result
    with right:
        st.markdown("---")
        c1, c2 = st.columns(2)
        c1.metric("Risk Skoru", f"{score:.2f}", classify_risk_degree(score), delta_color="off")
        c2.metric("Finansal Etki", impact)

# -----------------------
# Saved assessments
# -----------------------
st.markdown("---")
st.subheader("📋 Kaydedilen Değerlendirmeler")
if not records:
    st.info("Henüz kaydedilmiş değerlendirme yok.")
else:
    for index, record in enumerate(list_records(records)):
        info, action = st.columns([5, 1])
        with info:
            st.markdown(f"**{record.risk}**")
            st.caption(f"{record.department} - {record.value_chain_step}")
            st.caption(f"Risk Skoru: {record.risk_score:.2f} ({record.risk_degree}) · Finansal Etki: {record.financial_impact}")
        with action:
            if st.button("Sil", key=f"delete_{index}_{record.timestamp}", type="primary"):
                try:
                    delete_record(records, index)
                except RiskAssessmentError as e:
                    st.toast(e.message, icon="⚠️")
                else:
                    st.toast("Risk değerlendirmesi silindi", icon="🗑️")
                    st.rerun()

    df = records_to_df(records)
    with st.expander("Tablo görünümü"):
        st.dataframe(df, width="stretch")

    # Heatmap
    matrix = build_matrix(df)
    numeric_matrix = pd.DataFrame(matrix, index=list(DEPARTMENTS), columns=RISK_DEGREES)

    fig = go.Figure(
        data=go.Heatmap(
            z=numeric_matrix.values,
            x=RISK_DEGREES,
            y=list(DEPARTMENTS),
            colorscale=[[0.0, "#2ECC71"], [0.5, "#F4D03F"], [1.0, "#E74C3C"]],
            hovertemplate="<b>Departman:</b> %{y}<br><b>Risk Derecesi:</b> %{x}<br><b>Değerlendirme:</b> %{z}<extra></extra>",
            showscale=True,
            zmin=0,
            zmax=max(int(numeric_matrix.values.max()), 1),
            colorbar_title="Adet",
        )
    )
    fig.update_layout(
        title="📊 Departman / Risk Derecesi Matrisi",
        margin=dict(l=60, r=60, t=60, b=60),
        height=450,
    )
    st.plotly_chart(fig, width="stretch")
