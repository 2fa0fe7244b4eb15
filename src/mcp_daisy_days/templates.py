"""Static templates for the ten layout archetypes."""

from collections.abc import Mapping
from types import MappingProxyType

from mcp_daisy_days.errors import UnknownArchetypeError
from mcp_daisy_days.models import Archetype, LayoutTemplate

TITLE_PLACEHOLDER = "{{title}}"


def _template(
    archetype: Archetype,
    default_title: str,
    root_classes: str,
    *sections: tuple[str, str],
) -> LayoutTemplate:
    """Build a template from ordered (section name, markup) pairs."""
    return LayoutTemplate(
        archetype=archetype,
        sections=tuple(name for name, _ in sections),
        default_title=default_title,
        slot_bindings=MappingProxyType(dict(sections)),
        root_classes=root_classes,
    )


SAAS = _template(
    Archetype.SAAS,
    "Launchpad",
    "min-h-screen bg-base-100",
    (
        "navbar",
        """<div class="navbar bg-base-100 sticky top-0 z-50 border-b border-base-200">
  <div class="flex-1"><a class="btn btn-ghost text-xl font-bold">{{title}}</a></div>
  <div class="flex-none gap-2">
    <ul class="menu menu-horizontal px-1 hidden sm:flex"><li><a>Features</a></li><li><a>Pricing</a></li><li><a>Contact</a></li></ul>
    <button class="btn btn-primary">Get Started</button>
  </div>
</div>""",
    ),
    (
        "hero",
        """<div class="hero min-h-[80vh] bg-base-200">
  <div class="hero-content text-center">
    <div class="max-w-2xl">
      <h1 class="text-5xl font-extrabold">Build faster with <span class="text-primary">{{title}}</span></h1>
      <p class="py-6 text-xl text-base-content/80">The scaffolding engine for modern web apps. Stop writing boilerplate.</p>
      <button class="btn btn-primary btn-lg">Start Free Trial</button>
      <button class="btn btn-ghost btn-lg ml-2">Read Docs</button>
    </div>
  </div>
</div>""",
    ),
    (
        "features",
        """<div class="py-24 bg-base-100">
  <div class="container mx-auto px-4">
    <h2 class="text-3xl font-bold text-center mb-12">Everything you need</h2>
    <div class="grid grid-cols-1 md:grid-cols-3 gap-8">
      <div class="card bg-base-200 shadow-sm"><div class="card-body"><h3 class="card-title">Fast</h3><p>Optimized for speed out of the box.</p></div></div>
      <div class="card bg-base-200 shadow-sm"><div class="card-body"><h3 class="card-title">Secure</h3><p>Sensible security defaults applied automatically.</p></div></div>
      <div class="card bg-base-200 shadow-sm"><div class="card-body"><h3 class="card-title">Themable</h3><p>Change the look in seconds with daisyUI themes.</p></div></div>
    </div>
  </div>
</div>""",
    ),
    (
        "footer",
        """<footer class="footer p-10 bg-base-300 text-base-content">
  <nav><h6 class="footer-title">Company</h6><a class="link link-hover">About us</a><a class="link link-hover">Contact</a></nav>
  <nav><h6 class="footer-title">Legal</h6><a class="link link-hover">Terms of use</a><a class="link link-hover">Privacy policy</a></nav>
</footer>""",
    ),
)

BLOG = _template(
    Archetype.BLOG,
    "The Daily Journal",
    "min-h-screen bg-base-100",
    (
        "navbar",
        """<div class="navbar bg-base-100 border-b border-base-200">
  <div class="flex-1"><a class="btn btn-ghost text-2xl font-serif">{{title}}</a></div>
</div>""",
    ),
    (
        "featured",
        """<div class="container mx-auto px-4 pt-12">
  <div class="card lg:card-side bg-base-200 shadow-xl mb-16">
    <figure class="lg:w-1/2"><img src="https://picsum.photos/800/600" alt="Featured" class="h-full object-cover" /></figure>
    <div class="card-body lg:w-1/2 justify-center">
      <h2 class="card-title text-4xl font-serif">Featured Article</h2>
      <p class="text-lg">Exploring the patterns that shape modern interfaces.</p>
      <div class="card-actions"><button class="btn btn-primary">Read Article</button></div>
    </div>
  </div>
</div>""",
    ),
    (
        "posts",
        """<div class="container mx-auto px-4 pb-12">
  <h3 class="text-2xl font-bold mb-6 border-b border-base-300 pb-2">Latest Stories</h3>
  <div class="grid md:grid-cols-3 gap-8">
    <div class="card bg-base-200"><div class="card-body"><div class="badge badge-ghost">Tech</div><h4 class="card-title">Post Title</h4><p>Post excerpt...</p></div></div>
    <div class="card bg-base-200"><div class="card-body"><div class="badge badge-ghost">Design</div><h4 class="card-title">Post Title</h4><p>Post excerpt...</p></div></div>
    <div class="card bg-base-200"><div class="card-body"><div class="badge badge-ghost">Culture</div><h4 class="card-title">Post Title</h4><p>Post excerpt...</p></div></div>
  </div>
</div>""",
    ),
    (
        "newsletter",
        """<div class="bg-base-200 py-12">
  <div class="container mx-auto px-4 max-w-xl text-center">
    <h3 class="font-bold text-lg mb-4">Newsletter</h3>
    <div class="join w-full"><input class="input input-bordered join-item w-full" placeholder="Email" /><button class="btn btn-primary join-item">Subscribe</button></div>
  </div>
</div>""",
    ),
)

SOCIAL = _template(
    Archetype.SOCIAL,
    "Chirp",
    "min-h-screen bg-base-100 flex justify-center",
    (
        "sidebar",
        """<div class="w-64 hidden lg:block p-4 border-r border-base-200">
  <div class="text-2xl font-bold text-primary mb-4">{{title}}</div>
  <ul class="menu w-full"><li><a class="active">Home</a></li><li><a>Notifications</a></li><li><a>Messages</a></li><li><a>Profile</a></li></ul>
  <button class="btn btn-primary w-full mt-8">Post</button>
</div>""",
    ),
    (
        "feed",
        """<div class="w-full lg:w-[600px] border-r border-base-200 min-h-screen">
  <div class="sticky top-0 bg-base-100/80 backdrop-blur z-20 border-b border-base-200 p-4 font-bold text-xl">Home</div>
  <div class="p-4 border-b border-base-200">
    <textarea class="textarea textarea-ghost w-full" placeholder="What is happening?"></textarea>
    <div class="flex justify-end"><button class="btn btn-primary btn-sm">Post</button></div>
  </div>
  <div class="p-4 border-b border-base-200 hover:bg-base-200/50">
    <div class="flex gap-4">
      <div class="avatar"><div class="w-12 rounded-full"><img src="https://picsum.photos/100" alt="Avatar" /></div></div>
      <div><span class="font-bold">Jane Doe</span> <span class="text-sm opacity-50">@janedoe 2h</span><p class="mt-1">Just shipped a new release!</p></div>
    </div>
  </div>
</div>""",
    ),
    (
        "trends",
        """<div class="hidden xl:block w-80 p-4">
  <div class="card bg-base-200"><div class="card-body p-4">
    <h3 class="font-bold text-lg">Trends for you</h3>
    <div class="py-2"><div class="text-xs opacity-50">Technology</div><div class="font-bold">#WebDev</div></div>
    <div class="py-2"><div class="text-xs opacity-50">Design</div><div class="font-bold">#UIUX</div></div>
  </div></div>
</div>""",
    ),
)

KANBAN = _template(
    Archetype.KANBAN,
    "Project Board",
    "h-screen flex flex-col bg-base-200",
    (
        "navbar",
        """<div class="navbar bg-base-100 shadow-sm px-4">
  <div class="flex-1"><h1 class="text-xl font-bold">{{title}}</h1></div>
  <div class="flex-none"><button class="btn btn-primary btn-sm">Share</button></div>
</div>""",
    ),
    (
        "board",
        """<div class="flex-1 overflow-x-auto p-6">
  <div class="flex gap-6">
    <div class="w-80 shrink-0 flex flex-col gap-3">
      <h3 class="font-bold uppercase text-sm opacity-70">To Do <span class="badge badge-sm">2</span></h3>
      <div class="card bg-base-100 shadow-sm p-4"><div class="badge badge-warning mb-2">Design</div><p class="font-semibold">Create mockups</p></div>
      <div class="card bg-base-100 shadow-sm p-4"><p class="font-semibold">Research competitors</p></div>
      <button class="btn btn-ghost btn-block">+ Add Task</button>
    </div>
    <div class="w-80 shrink-0 flex flex-col gap-3">
      <h3 class="font-bold uppercase text-sm opacity-70">In Progress <span class="badge badge-sm">1</span></h3>
      <div class="card bg-base-100 shadow-sm p-4"><div class="badge badge-info mb-2">Dev</div><p class="font-semibold">Implement auth</p><progress class="progress progress-primary mt-2" value="40" max="100"></progress></div>
    </div>
    <div class="w-80 shrink-0 flex flex-col gap-3">
      <h3 class="font-bold uppercase text-sm opacity-70">Done <span class="badge badge-sm">1</span></h3>
      <div class="card bg-base-100 shadow-sm p-4 opacity-60"><p class="line-through">Set up repository</p></div>
    </div>
  </div>
</div>""",
    ),
)

INBOX = _template(
    Archetype.INBOX,
    "Mail",
    "h-screen flex bg-base-100",
    (
        "folders",
        """<div class="w-64 border-r border-base-200 flex flex-col">
  <div class="p-4 font-bold text-xl">{{title}}</div>
  <button class="btn btn-primary mx-4">Compose</button>
  <ul class="menu flex-1 p-2"><li><a class="active">Inbox <span class="badge">4</span></a></li><li><a>Sent</a></li><li><a>Drafts</a></li><li><a>Trash</a></li></ul>
</div>""",
    ),
    (
        "messages",
        """<div class="w-80 border-r border-base-200 overflow-y-auto">
  <div class="p-2"><input class="input input-bordered w-full" placeholder="Search" /></div>
  <div class="p-4 hover:bg-base-200 cursor-pointer border-b border-base-200"><span class="font-bold">Sender</span><div class="font-semibold truncate">Subject line</div><div class="text-sm opacity-60 truncate">Preview text...</div></div>
</div>""",
    ),
    (
        "reader",
        """<div class="flex-1 flex flex-col">
  <div class="p-6 border-b border-base-200"><h2 class="text-2xl font-bold">Email Subject</h2><div class="mt-2 text-sm">From: <span class="font-bold">sender@example.com</span></div></div>
  <div class="p-6 flex-1"><p>Email content goes here...</p></div>
</div>""",
    ),
)

PROFILE = _template(
    Archetype.PROFILE,
    "Account Settings",
    "min-h-screen bg-base-200 p-4 md:p-8",
    (
        "header",
        """<div class="max-w-4xl mx-auto"><h1 class="text-3xl font-bold mb-8">{{title}}</h1></div>""",
    ),
    (
        "settings",
        """<div class="max-w-4xl mx-auto flex flex-col md:flex-row gap-6">
  <ul class="menu bg-base-100 rounded-box w-full md:w-64 shadow-sm"><li><a class="active">General</a></li><li><a>Account</a></li><li><a>Notifications</a></li><li><a class="text-error">Danger Zone</a></li></ul>
  <div class="flex-1 card bg-base-100 shadow-sm">
    <div class="card-body">
      <h2 class="card-title mb-4">Profile Information</h2>
      <div class="flex items-center gap-4 mb-6"><div class="avatar placeholder"><div class="bg-neutral text-neutral-content rounded-full w-24"><span class="text-3xl">U</span></div></div><button class="btn btn-sm btn-outline">Change Avatar</button></div>
      <fieldset class="fieldset"><legend class="fieldset-legend">Name</legend><input class="input input-bordered w-full" value="User Name" /></fieldset>
      <fieldset class="fieldset"><legend class="fieldset-legend">Email</legend><input class="input input-bordered w-full" value="user@example.com" /></fieldset>
      <fieldset class="fieldset"><legend class="fieldset-legend">Bio</legend><textarea class="textarea textarea-bordered w-full">Bio here...</textarea></fieldset>
      <div class="card-actions justify-end mt-4"><button class="btn btn-primary">Save Changes</button></div>
    </div>
  </div>
</div>""",
    ),
)

DOCS = _template(
    Archetype.DOCS,
    "Documentation",
    "drawer lg:drawer-open",
    (
        "toggle",
        """<input id="docs-drawer" type="checkbox" class="drawer-toggle" />""",
    ),
    (
        "content",
        """<div class="drawer-content">
  <div class="navbar bg-base-100 border-b border-base-200 lg:hidden"><label for="docs-drawer" class="btn btn-ghost">Menu</label><span class="font-bold">{{title}}</span></div>
  <div class="p-8 max-w-4xl mx-auto">
    <div class="text-sm breadcrumbs mb-4"><ul><li><a>Docs</a></li><li>Installation</li></ul></div>
    <h1 class="text-4xl font-bold mb-6">Installation</h1>
    <p class="mb-4 text-lg">Get up and running in minutes.</p>
    <div class="mockup-code mb-6"><pre data-prefix="$"><code>npm install daisyui</code></pre></div>
    <h2 class="text-2xl font-bold mt-8 mb-4">Configuration</h2>
    <p>Add the plugin to your stylesheet.</p>
    <div role="alert" class="alert alert-info mt-8"><span>Requires Node.js 18 or later.</span></div>
  </div>
</div>""",
    ),
    (
        "sidebar",
        """<div class="drawer-side border-r border-base-200">
  <label for="docs-drawer" class="drawer-overlay"></label>
  <ul class="menu p-4 w-80 min-h-full bg-base-100"><li class="menu-title">{{title}}</li><li><a class="active">Installation</a></li><li><a>Usage</a></li><li><a>Components</a></li></ul>
</div>""",
    ),
)

DASHBOARD = _template(
    Archetype.DASHBOARD,
    "Admin Dashboard",
    "drawer lg:drawer-open",
    (
        "toggle",
        """<input id="dash-drawer" type="checkbox" class="drawer-toggle" />""",
    ),
    (
        "content",
        """<div class="drawer-content flex flex-col">
  <div class="navbar bg-base-300"><div class="lg:hidden"><label for="dash-drawer" class="btn btn-ghost">Menu</label></div><div class="flex-1 font-bold text-xl px-4">{{title}}</div></div>
  <div class="p-6">
    <div class="stats shadow mb-6 w-full">
      <div class="stat"><div class="stat-title">Users</div><div class="stat-value">31K</div><div class="stat-desc">22% more than last month</div></div>
      <div class="stat"><div class="stat-title">Revenue</div><div class="stat-value">$12.5K</div><div class="stat-desc">14% more than last month</div></div>
      <div class="stat"><div class="stat-title">Orders</div><div class="stat-value">1,234</div><div class="stat-desc">3% less than last month</div></div>
    </div>
    <div class="card bg-base-100 shadow"><div class="card-body"><h3 class="card-title">Recent Activity</h3><p>Activity items go here...</p></div></div>
  </div>
</div>""",
    ),
    (
        "sidebar",
        """<div class="drawer-side">
  <label for="dash-drawer" class="drawer-overlay"></label>
  <ul class="menu p-4 w-80 min-h-full bg-base-200"><li class="menu-title">Menu</li><li><a class="active">Overview</a></li><li><a>Analytics</a></li><li><a>Settings</a></li></ul>
</div>""",
    ),
)

AUTH = _template(
    Archetype.AUTH,
    "Welcome Back",
    "hero min-h-screen bg-base-200",
    (
        "form",
        """<div class="card w-full max-w-sm shadow-2xl bg-base-100">
  <form class="card-body">
    <h1 class="text-2xl font-bold text-center">{{title}}</h1>
    <fieldset class="fieldset"><legend class="fieldset-legend">Email</legend><input type="email" class="input input-bordered w-full" required /></fieldset>
    <fieldset class="fieldset"><legend class="fieldset-legend">Password</legend><input type="password" class="input input-bordered w-full" required /><a class="link link-hover text-sm">Forgot password?</a></fieldset>
    <button class="btn btn-primary mt-6">Login</button>
    <div class="divider">OR</div>
    <button type="button" class="btn btn-outline">Sign up</button>
  </form>
</div>""",
    ),
)

STORE = _template(
    Archetype.STORE,
    "Shop",
    "min-h-screen bg-base-100",
    (
        "navbar",
        """<div class="navbar bg-base-100 border-b border-base-200">
  <div class="flex-1"><a class="btn btn-ghost text-xl">{{title}}</a></div>
  <div class="flex-none"><button class="btn btn-ghost"><span class="indicator">Cart<span class="badge badge-sm indicator-item">3</span></span></button></div>
</div>""",
    ),
    (
        "hero",
        """<div class="hero bg-base-200 py-16">
  <div class="hero-content text-center"><div><h1 class="text-5xl font-bold">{{title}}</h1><p class="py-6">Discover amazing products</p><button class="btn btn-primary">Shop Now</button></div></div>
</div>""",
    ),
    (
        "products",
        """<div class="container mx-auto p-8">
  <h2 class="text-2xl font-bold mb-6">Featured Products</h2>
  <div class="grid grid-cols-1 md:grid-cols-3 lg:grid-cols-4 gap-6">
    <div class="card bg-base-100 shadow"><figure><img src="https://picsum.photos/400/300" alt="Product" /></figure><div class="card-body"><h3 class="card-title">Product</h3><p>$99.00</p><button class="btn btn-primary btn-sm">Add to Cart</button></div></div>
    <div class="card bg-base-100 shadow"><figure><img src="https://picsum.photos/400/301" alt="Product" /></figure><div class="card-body"><h3 class="card-title">Product</h3><p>$49.00</p><button class="btn btn-primary btn-sm">Add to Cart</button></div></div>
  </div>
</div>""",
    ),
)

TEMPLATES: Mapping[Archetype, LayoutTemplate] = MappingProxyType(
    {
        template.archetype: template
        for template in (SAAS, BLOG, SOCIAL, KANBAN, INBOX, PROFILE, DOCS, DASHBOARD, AUTH, STORE)
    }
)


class LayoutTemplateRegistry:
    """Resolves archetype names to their static templates.

    The archetype set is closed: there is no runtime registration, and every
    member of :class:`Archetype` must have exactly one template.
    """

    def __init__(self, templates: Mapping[Archetype, LayoutTemplate] = TEMPLATES) -> None:
        """Initialise registry.

        Args:
            templates: Template per archetype, defaults to the built-in set.

        Raises:
            ValueError: If an archetype has no template.
        """
        missing = [archetype.value for archetype in Archetype if archetype not in templates]
        if missing:
            msg = f"No template for archetypes: {', '.join(missing)}"
            raise ValueError(msg)
        self._templates = templates

    def resolve(self, archetype: str | Archetype) -> LayoutTemplate:
        """Return the template for an archetype name.

        Args:
            archetype: Archetype member or name, matched case-insensitively.

        Returns:
            The archetype's LayoutTemplate.

        Raises:
            UnknownArchetypeError: If the name is not one of the ten archetypes.
        """
        if isinstance(archetype, Archetype):
            return self._templates[archetype]
        try:
            key = Archetype(archetype.strip().lower())
        except ValueError:
            raise UnknownArchetypeError(archetype) from None
        return self._templates[key]

    def archetypes(self) -> list[str]:
        """Return archetype names in their fixed order."""
        return [archetype.value for archetype in Archetype]
