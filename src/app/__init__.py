# Streamlit front end
