import logging

import streamlit as st

from agent import ChatAgent, build_llm
from config import settings

logger = logging.getLogger(__name__)

APOLOGY = "Oops! Server error, please try again later."

# Page configuration
st.set_page_config(
    page_title="Restaurant Assistant",
    page_icon="🍽️",
    layout="centered"
)


@st.cache_resource
def get_agent():
    """Build the chat model once per Streamlit server process"""
    return ChatAgent(build_llm(settings))


# Display-only history; every prompt is answered on its own
if "messages" not in st.session_state:
    st.session_state.messages = []

# App header
st.title("🍽️ Restaurant Assistant")
st.markdown("**Menus, meal ideas, opening hours and food tips**")
st.markdown("---")

for message in st.session_state.messages:
    with st.chat_message(message["role"]):
        st.markdown(message["content"])

if prompt := st.chat_input("Ask me about our menu..."):
    st.session_state.messages.append({"role": "user", "content": prompt})

    with st.chat_message("user"):
        st.markdown(prompt)

    with st.chat_message("assistant"):
        with st.spinner("Typing..."):
            try:
                response = get_agent().reply(prompt).answer
            except Exception:
                logger.exception("Chat failed")
                response = APOLOGY

            st.markdown(response)

    st.session_state.messages.append({"role": "assistant", "content": response})
