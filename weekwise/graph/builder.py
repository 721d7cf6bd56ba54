"""LangGraph graph builder: assembles the chat-to-plan gateway pipeline."""

from langgraph.graph import StateGraph, START, END

from weekwise.agents.coach_agent import coach_node
from weekwise.config import Settings
from weekwise.models.state import GatewayState
from weekwise.utils.llm_parse import parse_model_reply


def parse_reply_node(state: GatewayState) -> dict:
    """Turn the raw completion into a StructuredReply or PlainReply.

    Populates: reply.
    """
    return {"reply": parse_model_reply(state.get("completion", ""))}


def format_response_node(state: GatewayState) -> dict:
    """Render the parsed reply as the HTTP body.

    Populates: body.
    """
    return {"body": state["reply"].to_body()}


def build_graph(settings: Settings, llm=None):
    """Construct and compile the gateway graph.

    Graph topology::

        START → coach → parse_reply → format_response → END

    Parameters
    ----------
    settings : Settings
        Passed by reference to the coach node on every call.
    llm : optional
        Chat model override; when omitted one is built per request.

    Returns
    -------
    langgraph.graph.CompiledGraph
        The compiled, ready-to-invoke graph.
    """
    graph = StateGraph(GatewayState)

    def _coach(state: GatewayState) -> dict:
        return coach_node(state, settings, llm=llm)

    graph.add_node("coach", _coach)
    graph.add_node("parse_reply", parse_reply_node)
    graph.add_node("format_response", format_response_node)

    graph.add_edge(START, "coach")
    graph.add_edge("coach", "parse_reply")
    graph.add_edge("parse_reply", "format_response")
    graph.add_edge("format_response", END)

    return graph.compile()
