"""
Walk through the main client operations against a real Jira site.

Reads JIRA_* variables (or a .env file), creates an issue in the first
project, comments on it, moves it through the first available transition,
then deletes it.
"""
import asyncio

from jira_api_client import CreateIssueData, JiraClient, JiraClientError, configure_logging


async def main() -> None:
    configure_logging(fmt="plain")
    async with JiraClient.from_env() as jira:
        me = await jira.users.get_current_user()
        print("Current user:", me.display_name)

        projects = await jira.projects.get_all_projects()
        if not projects.values:
            print("No projects found. Please create a project in Jira first.")
            return
        project = projects.values[0]
        print(f"Using project: {project.name} ({project.key})")

        issue_types = await jira.projects.get_project_issue_types(project.key)
        if not issue_types:
            print("No issue types found for this project.")
            return
        issue_type = next((t for t in issue_types if t.name == "Task"), issue_types[0])

        created = await jira.issues.create_issue(
            CreateIssueData(
                fields={
                    "project": {"key": project.key},
                    "summary": "Test issue created via API",
                    "issuetype": {"id": issue_type.id},
                }
            )
        )
        issue = await jira.issues.get_issue(created.key)
        print(f"Created issue: {issue.key} - {issue.summary} [{issue.status_name}]")

        comment = await jira.issues.add_comment(issue.key, "This is a comment added via the API client.")
        print("Added comment:", comment.id)

        transitions = await jira.issues.get_transitions(issue.key)
        print("Available transitions:", [f"{t.name} ({t.id})" for t in transitions])
        if transitions:
            moved = await jira.issues.transition_issue(issue.key, transitions[0].name)
            print("Transitioned with:", moved.name)

        found = await jira.issues.search_issues(f"project = {project.key} ORDER BY created DESC", pagination={"maxResults": 5})
        print(f"Search found {found.total} issues; latest: {[i.key for i in found.values]}")

        await jira.issues.delete_issue(issue.key)
        print("Deleted issue:", issue.key)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except JiraClientError as exc:
        print(f"Jira error: {exc}")
        raise SystemExit(1)
