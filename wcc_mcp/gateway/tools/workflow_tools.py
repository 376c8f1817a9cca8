"""Workflow tools."""

from typing import Any

from wcc_mcp.client.webcenter import WebCenterContentClient
from wcc_mcp.gateway.registry import ToolDefinition
from wcc_mcp.gateway.tools.helpers import DOC_NAME, limit, string


def _list_workflows(client: WebCenterContentClient, _: dict[str, Any]) -> Any:
    return client.list_workflows()


def _get_workflow(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_workflow(args["workflowName"])


def _list_workflow_assignments(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.list_workflow_assignments(limit=args["limit"])


def _get_document_workflow(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.get_document_workflow(args["dDocName"])


def _approve_workflow_step(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.approve_workflow_step(args["dDocName"], comment=args["comment"])


def _reject_workflow_step(client: WebCenterContentClient, args: dict[str, Any]) -> Any:
    return client.reject_workflow_step(args["dDocName"], args["reason"])


WORKFLOW_TOOLS: tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="list-workflows",
        title="List Workflows",
        description="List the workflows defined on the server",
        handler=_list_workflows,
    ),
    ToolDefinition(
        name="get-workflow",
        title="Get Workflow",
        description="Get the definition of a workflow",
        handler=_get_workflow,
        parameters=(string("workflowName", "Workflow name (dWfName)", required=True),),
    ),
    ToolDefinition(
        name="list-workflow-assignments",
        title="List Workflow Assignments",
        description="List workflow items assigned to the current user",
        handler=_list_workflow_assignments,
        parameters=(limit(),),
    ),
    ToolDefinition(
        name="get-document-workflow",
        title="Get Document Workflow",
        description="Get the workflow state of a document",
        handler=_get_document_workflow,
        parameters=(DOC_NAME,),
    ),
    ToolDefinition(
        name="approve-workflow-step",
        title="Approve Workflow Step",
        description="Approve the current workflow step of a document",
        handler=_approve_workflow_step,
        parameters=(DOC_NAME, string("comment", "Approval comment (optional)")),
        read_only=False,
        idempotent=False,
    ),
    ToolDefinition(
        name="reject-workflow-step",
        title="Reject Workflow Step",
        description="Reject the current workflow step of a document",
        handler=_reject_workflow_step,
        parameters=(DOC_NAME, string("reason", "Reason for the rejection", required=True)),
        read_only=False,
        idempotent=False,
    ),
)
