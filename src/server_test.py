import re

from playwright.sync_api import expect
import httpx

from src.server import FileWatcher


# ##################################################################
# test server health endpoint
# verifies the health endpoint responds with ok status
def test_server_health_endpoint(server):
    response = httpx.get(f"{server}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


# ##################################################################
# test index page loads
# verifies the portfolio page is rendered with hot reload attached
def test_index_page_loads(server):
    response = httpx.get(f"{server}/")
    assert response.status_code == 200
    assert 'id="typing-text"' in response.text
    assert "EventSource('/hot-reload')" in response.text


# ##################################################################
# test unknown path returns error page
def test_unknown_path_returns_error_page(server):
    response = httpx.get(f"{server}/does-not-exist.pdf")
    assert response.status_code == 404
    assert "Page not found" in response.text


# ##################################################################
# test public file served
def test_public_file_served(server):
    response = httpx.get(f"{server}/robots.txt")
    assert response.status_code == 200
    assert "User-agent" in response.text


# ##################################################################
# test file watcher detects changes
# output directory writes are ignored so regeneration does not loop
def test_file_watcher_detects_changes(tmp_path):
    web = tmp_path / "web"
    web.mkdir()
    config = tmp_path / "config.json"
    config.write_text("{}")
    watcher = FileWatcher(tmp_path, ignore=web)

    assert not watcher.check_changes()

    (web / "index.html").write_text("<html></html>")
    assert not watcher.check_changes()

    config.write_text('{"theme": "light"}')
    watcher.file_times[str(config)] = -1.0
    assert watcher.check_changes()

    config.unlink()
    assert watcher.check_changes()
    assert not watcher.check_changes()


# ##################################################################
# test typing animation runs
# the typed text changes over time and always keeps its cursor
def test_typing_animation_runs(portfolio_page):
    typing = portfolio_page.locator("#typing-text")
    expect(typing.locator(".cursor")).to_have_count(1)
    first = typing.inner_text()
    portfolio_page.wait_for_function(
        "first => document.getElementById('typing-text').innerText !== first", arg=first, timeout=5000
    )
    expect(typing.locator(".cursor")).to_have_count(1)


# ##################################################################
# test sections reveal on scroll
def test_sections_reveal_on_scroll(portfolio_page):
    card = portfolio_page.locator(".project-card").first
    expect(card).not_to_have_class(re.compile(r"\bvisible\b"))
    card.scroll_into_view_if_needed()
    expect(card).to_have_class(re.compile(r"\bvisible\b"))


# ##################################################################
# test skill bar fills on reveal
def test_skill_bar_fills_on_reveal(portfolio_page):
    card = portfolio_page.locator(".skill-card").first
    card.scroll_into_view_if_needed()
    progress = card.locator(".skill-progress")
    expected = progress.get_attribute("data-width")
    portfolio_page.wait_for_function(
        """expected => {
            const bar = document.querySelector('.skill-card .skill-progress');
            return bar.style.getPropertyValue('--skill-width') === expected;
        }""",
        arg=expected,
        timeout=5000,
    )


# ##################################################################
# test theme toggle
# switches data-theme and icon without touching local storage
def test_theme_toggle(portfolio_page):
    root = portfolio_page.locator("html")
    toggle = portfolio_page.locator(".theme-toggle")
    expect(root).to_have_attribute("data-theme", "dark")
    expect(toggle.locator("i")).to_have_class("fas fa-sun")

    toggle.click()
    expect(root).to_have_attribute("data-theme", "light")
    expect(toggle.locator("i")).to_have_class("fas fa-moon")
    assert portfolio_page.evaluate("window.currentTheme") == "light"
    assert portfolio_page.evaluate("window.localStorage.length") == 0

    toggle.click()
    expect(root).to_have_attribute("data-theme", "dark")


# ##################################################################
# test contact form validation
# an empty submit flags every required field and never sends
def test_contact_form_validation(portfolio_page):
    form = portfolio_page.locator("#contact-form")
    form.scroll_into_view_if_needed()
    form.locator(".btn-submit").click()

    expect(form.locator(".form-group.error")).to_have_count(3)
    expect(portfolio_page.locator("#form-status")).to_contain_text("Please fix the errors")

    form.locator("#email").fill("not-an-email")
    form.locator("#email").blur()
    expect(form.locator("#email + .form-error")).to_have_text("Please enter a valid email address")


# ##################################################################
# test contact form simulated send
def test_contact_form_simulated_send(portfolio_page):
    form = portfolio_page.locator("#contact-form")
    form.scroll_into_view_if_needed()
    form.locator("#name").fill("Ada")
    form.locator("#email").fill("ada@example.com")
    form.locator("#message").fill("Hello there")
    form.locator(".btn-submit").click()

    expect(form.locator(".btn-submit")).to_be_disabled()
    expect(portfolio_page.locator("#form-status")).to_contain_text("Message sent successfully", timeout=5000)
    expect(form.locator(".btn-submit")).to_have_text("Send Message")
    expect(form.locator("#name")).to_have_value("")
