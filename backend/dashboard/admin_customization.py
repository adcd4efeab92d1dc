from django.contrib import admin
from django.utils.translation import gettext_lazy as _

# Branding for the content dashboard admin. The index page is where the
# registered dashboard widgets are rendered (see templates/admin/index.html).

admin.site.site_title = _('Content Dashboard Admin')
admin.site.site_header = _('Content Dashboard')
admin.site.index_title = _('Dashboard')
