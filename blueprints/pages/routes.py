"""
Pages Routes - Public portfolio pages
"""

from datetime import datetime
from flask import render_template, request, send_file, abort, current_app, url_for
from utils.data import get_profile, get_projects, get_skills
from utils.helpers import get_resume_path
from . import pages_bp


# Endpoints listed in the sitemap, in navbar order
SITEMAP_ENDPOINTS = ('pages.home', 'pages.resume', 'pages.projects', 'pages.skills', 'pages.contact')


@pages_bp.route('/')
def home():
    """Landing page - greeting and headline"""
    return render_template('pages/home.html', profile=get_profile())


@pages_bp.route('/resume')
def resume():
    """Resume viewer - embeds the resume document"""
    profile = get_profile()
    return render_template('pages/resume.html',
                           profile=profile,
                           resume_url=url_for('pages.resume_document'))


@pages_bp.route('/projects')
def projects():
    """Project cards"""
    return render_template('pages/projects.html', projects=get_projects())


@pages_bp.route('/skills')
def skills():
    """Skill cards"""
    return render_template('pages/skills.html', skills=get_skills())


@pages_bp.route('/contact')
def contact():
    """Contact details"""
    return render_template('pages/contact.html', profile=get_profile())


@pages_bp.route('/Kedhar_Vishnu_Developer.pdf')
def resume_document():
    """Serve the resume PDF; ``?download=1`` sends it as an attachment"""
    path = get_resume_path()
    if path is None:
        abort(404)

    as_attachment = request.args.get('download') in ('1', 'true', 'yes')
    current_app.logger.info(f"Serving resume document (download={as_attachment})")
    return send_file(path,
                     mimetype='application/pdf',
                     as_attachment=as_attachment,
                     download_name=get_profile().resume_filename)


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    lastmod = datetime.now().strftime('%Y-%m-%d')

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for endpoint in SITEMAP_ENDPOINTS:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{base_url}{url_for(endpoint)}</loc>')
        sitemap_xml.append(f'<lastmod>{lastmod}</lastmod>')
        sitemap_xml.append('<changefreq>monthly</changefreq>')
        sitemap_xml.append(f'<priority>{"1.0" if endpoint == "pages.home" else "0.8"}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Disallow: /theme/

Sitemap: """ + request.url_root.rstrip('/') + """/sitemap.xml"""

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
