"""Cross-cutting helpers shared by services and views."""
