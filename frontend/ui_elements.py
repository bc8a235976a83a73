#file: frontend/ui_elements.py

from html import escape

import streamlit as st
import plotly.express as px

from frontend.state import Failed, Loaded, Loading
from frontend.status import LEGEND_ENTRIES, get_status_from_index
from frontend.utils import sub_indices_frame


def overall_badge_html(reading) -> str :
    """Pill badge with the upstream colour and qualifier of the overall index."""
    return (
        f'<div style="text-align:center;margin-bottom:0.5rem">'
        f'<span style="display:inline-block;padding:1rem 2rem;border-radius:9999px;color:white;'
        f'font-size:1.5rem;font-weight:bold;background-color:{escape(reading.overall_color)}">'
        f'{escape(reading.overall_qualifier)}</span></div>'
    )


def pollutant_badge_html(sub_index) -> str :
    """Round badge for one pollutant, coloured from the local status table."""
    status = get_status_from_index(sub_index.pollutant_index)
    return (
        f'<div style="text-align:center">'
        f'<div style="width:4rem;height:4rem;border-radius:50%;display:flex;align-items:center;'
        f'justify-content:center;margin:0 auto 0.5rem;color:white;font-weight:bold;'
        f'background-color:{status.color}">{escape(sub_index.pollutant_name)}</div>'
        f'<div style="font-size:0.875rem;font-weight:600">Indice {escape(str(sub_index.pollutant_index))}</div>'
        f'<div style="font-size:0.75rem;color:#6B7280">{escape(status.label)}</div>'
        f'</div>'
    )


def legend_html() -> str :
    """Static legend of every status level plus the event entry."""
    items = "".join(
        f'<div style="display:flex;align-items:center">'
        f'<span style="width:1rem;height:1rem;border-radius:50%;margin-right:0.5rem;'
        f'background-color:{status.color}"></span><span>{escape(status.label)}</span></div>'
        for status in LEGEND_ENTRIES
    )
    return f'<div style="display:grid;grid-template-columns:repeat(4, 1fr);gap:0.5rem">{items}</div>'


def display_reading(reading) :
    """Display the overall index and the pollutant badges of a reading."""
    st.subheader(reading.commune_name)
    st.markdown(overall_badge_html(reading), unsafe_allow_html = True)
    st.markdown(f"<p style='text-align:center'>Indice global : {reading.overall_index}</p>", unsafe_allow_html = True)
    st.caption(reading.valid_at)

    st.subheader("Détail par polluant")
    if reading.sub_indices :
        columns = st.columns(len(reading.sub_indices))
        for column, sub_index in zip(columns, reading.sub_indices) :
            with column :
                st.markdown(pollutant_badge_html(sub_index), unsafe_allow_html = True)
        display_sub_index_chart(reading)


def sub_index_figure(data_frame) :
    """Bar chart of the sub-indices, each bar coloured from its own row."""
    fig = px.bar(
        data_frame,
        x = "pollutant",
        y = "index",
        hover_data = ["label", "concentration"],
        range_y = [0, 6],
        labels = {
            "pollutant" : "Polluant",
            "index" : "Indice"
        }
    )
    fig.update_traces(marker_color = data_frame["color"].tolist())
    fig.update_layout(showlegend = False)
    return fig


def display_sub_index_chart(reading) :
    """Display a bar chart and a table of the sub-indices."""
    data_frame = sub_indices_frame(reading)

    st.plotly_chart(sub_index_figure(data_frame))
    st.dataframe(data_frame.drop(columns = ["color"]), hide_index = True)


def display_legend() :
    st.markdown("#### Légende")
    st.markdown(legend_html(), unsafe_allow_html = True)


def display_state(state) :
    """Render the dashboard for one of the three states."""
    if isinstance(state, Loading) :
        st.info("Chargement...")
    elif isinstance(state, Failed) :
        st.error(state.message)
    elif isinstance(state, Loaded) :
        display_reading(state.reading)
        display_legend()
