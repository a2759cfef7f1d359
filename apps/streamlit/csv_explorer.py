import streamlit as st
from pydantic import ValidationError

from csvchart.builder import build_chart
from csvchart.config import ChartConfig
from csvchart.conclusion import conclusion_markdown
from csvchart.loader import DatasetError, column_names, load_records
from csvchart.models import ChartMode, ChartRequest
from csvchart.render import build_figure


st.set_page_config(page_title="CSV Explorer", layout="wide")
st.title("CSV Explorer (Upload → Plot)")

config = ChartConfig.from_env()
file = st.file_uploader("Upload CSV", type=["csv"])
if file:
    try:
        records = load_records(file.getvalue())
    except DatasetError as exc:
        st.error(str(exc))
        st.stop()
    st.success("File uploaded successfully! Now select columns and chart type.")
    st.dataframe(records[:50], use_container_width=True)
    cols = column_names(records)

    x = st.selectbox("X", cols, index=0)
    y = st.multiselect("Y", cols)
    kind = st.selectbox("Chart", [mode.value for mode in ChartMode])
    if st.button("Generate chart"):
        try:
            request = ChartRequest(x_column=x or "", y_columns=y, mode=kind)
        except ValidationError:
            st.warning("Please select X-axis and at least one Y-axis parameter.")
            st.stop()
        chart = build_chart(records, request.x_column, request.y_columns, request.mode, config)
        st.plotly_chart(build_figure(chart, config), use_container_width=True)
        st.markdown(conclusion_markdown(chart.facts))

# streamlit run apps\streamlit\csv_explorer.py
